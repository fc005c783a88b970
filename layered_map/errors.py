class KeyNotFound(KeyError):
    """Raised by strict reads when no layer holds the requested key."""

    def __init__(self, key, message=None):
        self.key = key
        super().__init__(message or f"Key '{key}' not found in any layer.")

    def __str__(self):
        # KeyError.__str__ would repr() the message
        return self.args[0]


class DuplicateKey(ValueError):
    """Raised by strict inserts when the main layer already holds the key."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"Key '{key}' already exists in the main layer.")


class InvalidArgument(ValueError):
    """Raised when something other than a mapping is offered as a layer."""

    def __init__(self, message, value=None):
        self.value = value
        super().__init__(message)


class UnsupportedOperation(TypeError):
    """Raised on any attempt to mutate a layer through its read-only view."""

    def __init__(self, operation, target=None):
        self.operation = operation
        self.target = target
        super().__init__(f"'{operation}' is not supported on a read-only layer.")
