from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Stable numeric codes of the errors shipped with the library."""
    DOES_NOT_MATCH = 0
    UNIMPLEMENTED = 1
    MESSAGE = 2
    UNEXPECTED_TOKEN = 3
    UNEXPECTED_END = 4
    UNCONSUMED_INPUT = 5


class ParseError(Exception):
    """
    Base class of every grammar-level parse error.

    Errors are opaque to the combinators: the only thing they rely on is
    `code`. Two errors are equal exactly when their codes are equal, whatever
    else they carry. Grammars define their own errors by subclassing and
    setting `code`.
    """
    code: int = ErrorCode.MESSAGE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)


class Message(ParseError):
    """A free-form failure, as produced by `fail(msg)`."""
    code = ErrorCode.MESSAGE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UnexpectedToken(ParseError):
    code = ErrorCode.UNEXPECTED_TOKEN

    def __init__(self, found: Any, expected: Any = None):
        super().__init__(found, expected)
        self.found = found
        self.expected = expected

    def __str__(self) -> str:
        if self.expected is None:
            return f"unexpected {self.found!r}"
        return f"unexpected {self.found!r}, expecting {self.expected!r}"


class UnexpectedEnd(ParseError):
    code = ErrorCode.UNEXPECTED_END

    def __init__(self, expected: Any = None):
        super().__init__(expected)
        self.expected = expected

    def __str__(self) -> str:
        if self.expected is None:
            return "unexpected end of input"
        return f"unexpected end of input, expecting {self.expected!r}"


class UnconsumedInput(ParseError):
    """Raised into a Failure when a complete parse leaves input behind."""
    code = ErrorCode.UNCONSUMED_INPUT

    def __init__(self, remaining: Any):
        super().__init__(remaining)
        self.remaining = remaining

    def __str__(self) -> str:
        preview = self.remaining[:30]
        return f"expecting end of input, found {preview!r}"


# Accessor misuse. These are programming errors in the calling code and are
# never turned into parse failures.

class ResultAccessError(Exception):
    pass


class UnwrappedFailedResult(ResultAccessError):
    def __init__(self, reason: ParseError):
        super().__init__(f"cannot unwrap a failed result: {reason}")
        self.reason = reason


class ErrorFromSuccessfulResult(ResultAccessError):
    def __init__(self, value: Any):
        super().__init__(f"cannot take the error of a successful result (value {value!r})")
        self.value = value
