import unittest
from layered_map.default import default_or_raise


class TestDefaultOrRaise(unittest.TestCase):

    def test_plain_value_is_returned(self):
        self.assertEqual(default_or_raise(5), 5)
        self.assertIsNone(default_or_raise(None, message="ignored"))

    def test_exception_is_raised(self):
        error = LookupError("lost")
        with self.assertRaises(LookupError) as ctx:
            default_or_raise(error)
        self.assertIs(ctx.exception, error)
        self.assertEqual(str(ctx.exception), "lost")

    def test_message_is_appended(self):
        with self.assertRaises(ValueError) as ctx:
            default_or_raise(ValueError("bad value", 42), message="while reading layer")
        self.assertEqual(ctx.exception.args, ("bad value | while reading layer", 42))

    def test_message_is_prepended_to_non_string_args(self):
        with self.assertRaises(RuntimeError) as ctx:
            default_or_raise(RuntimeError(7), message="context")
        self.assertEqual(ctx.exception.args, ("context", 7))


if __name__ == "__main__":
    unittest.main()
