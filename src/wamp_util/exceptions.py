"""Exceptions for wamp-util."""


class WampUtilError(Exception):
    """Base exception for wamp-util errors."""

    pass


class AssertionFailedError(WampUtilError, AssertionError):
    """A runtime invariant did not hold."""

    def __init__(self, message: str | None = None):
        super().__init__(message or "Assertion failed!")


class InvalidArgumentError(WampUtilError, TypeError):
    """A merge source was neither falsy nor a mapping.

    Attributes:
        index: Position of the offending argument in the call (base is 0)
    """

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Expected argument at index {index} to be a mapping")
