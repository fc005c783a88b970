def default_or_raise(default_value, message=None):
    """
    Return default_value, or raise it when it is an exception instance.

    Service function for optional get-accessors: a caller passes either a plain default to be
    returned on a miss, or an exception to make the miss fatal.

    Parameters:
    default_value (any): The fallback value, or an Exception instance to raise.
    message (str, optional): Context appended to the exception's message. Defaults to None.

    Returns:
    any: default_value, if it is not an exception.

    Raises:
    Exception: default_value itself, its message augmented with 'message' when given.
    """
    if not isinstance(default_value, Exception):
        return default_value

    if message:
        args = default_value.args
        if args and isinstance(args[0], str):
            default_value.args = (f"{args[0]} | {message}",) + args[1:]
        else:
            default_value.args = (message,) + args
    raise default_value
