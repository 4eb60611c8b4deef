# Argline Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the exception classes raised by argline.

Exception Hierarchy:
- ArglineError
    └── ParseError

`ParseError` is the only failure a parse can produce. Whatever the cause (an
invalid token, an unterminated quote, or a long flag without a value), the
caller receives the same exception type and no partial result. The `position`
and `message` attributes are diagnostic extras and may be ignored.
"""


class ArglineError(Exception):
    """Base exception for argline."""


class ParseError(ArglineError):
    """Exception raised when a command string is not well-formed.

    Attributes:
        message (str): Human-readable description of the failure.
        position (int | None): Index into the input where parsing failed,
            or None when the input ended too early.
    """

    def __init__(self, message: str = "parse failed", position: int | None = None):
        self.message = message
        self.position = position
        super().__init__(message)

    def __str__(self) -> str:
        if self.position is None:
            return f"{self.message} (at end of input)"
        return f"{self.message} (at position {self.position})"
