"""
Syntax errors raised by the BL parser.

Every grammar violation is reported through `assert_else_fatal`, which raises a
`BLSyntaxError` at the first point the violation is observable. The parser never
catches its own errors; the first one ends the parse and no partial tree is
returned. Only the command-line entry point turns the error into a message and
an exit status.

Classes:
    ErrorKind: The kinds of syntax error.
    BLSyntaxError: `SyntaxError` subclass carrying kind, position and token.
"""

from enum import Enum


class ErrorKind(Enum):
    UNEXPECTED_TOKEN = "unexpected_token"
    INVALID_CONDITION = "invalid_condition"
    INVALID_STATEMENT_START = "invalid_statement_start"
    UNKNOWN_CONDITION = "unknown_condition"
    NESTING_TOO_DEEP = "nesting_too_deep"


class BLSyntaxError(SyntaxError):
    """A fatal BL syntax error.

    Attributes:
        kind (ErrorKind): What went wrong.
        message (str): Human readable description.
        position (int | None): 0-based index of the offending token in the stream
            as it was handed to the parser.
        token (str | None): The offending token text.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        position: int | None = None,
        token: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.position = position
        self.token = token

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (token {self.position})"

    def __repr__(self) -> str:
        return (
            f"BLSyntaxError({self.kind.name}, {self.message!r}, "
            f"position={self.position}, token={self.token!r})"
        )


def assert_else_fatal(
    condition: bool,
    kind: ErrorKind,
    message: str,
    position: int | None = None,
    token: str | None = None,
) -> None:
    """Raise `BLSyntaxError` unless `condition` holds."""
    if not condition:
        raise BLSyntaxError(kind, message, position=position, token=token)
