from dataclasses import dataclass
from typing import Any, Callable, Generic, Sequence, TypeVar

from .Errors import ErrorFromSuccessfulResult, ParseError, UnwrappedFailedResult

S = TypeVar('S', bound=Sequence)  # Input stream type (str, bytes, list of tokens, ...)
T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')


class ParseResult(Generic[S, T]):
    """
    Outcome of a single parse attempt: either `Success(value, remaining)` or
    `Failure(reason)`.

    All case analysis of results lives in this module. Combinators only ever
    go through `map`, `flat_map` and the predicates below.
    """
    __slots__ = ()

    def map(self, f: Callable[[T, S], U]) -> 'ParseResult[S, U]':
        """Replace a successful value with f(value, remaining). Failures pass through."""
        raise NotImplementedError

    def flat_map(self, f: Callable[[T, S], 'ParseResult[S, U]']) -> 'ParseResult[S, U]':
        """Continue with f(value, remaining) on success. Failures short-circuit, f is not called."""
        raise NotImplementedError

    def recover(self, f: Callable[[ParseError], 'ParseResult[S, T]']) -> 'ParseResult[S, T]':
        """Replace a failure with f(error). Successes pass through, f is not called."""
        raise NotImplementedError

    def is_success(self) -> bool:
        raise NotImplementedError

    def is_failed(self) -> bool:
        return not self.is_success()

    def unwrap(self) -> T:
        """The parsed value. Raises UnwrappedFailedResult on a failure."""
        raise NotImplementedError

    def rest(self) -> S:
        """The unconsumed input. Raises UnwrappedFailedResult on a failure."""
        raise NotImplementedError

    def error(self) -> ParseError:
        """The parse error. Raises ErrorFromSuccessfulResult on a success."""
        raise NotImplementedError


@dataclass(frozen=True)
class Success(ParseResult[S, T]):
    value: T
    remaining: S

    def map(self, f: Callable[[T, S], U]) -> ParseResult[S, U]:
        return Success(f(self.value, self.remaining), self.remaining)

    def flat_map(self, f: Callable[[T, S], ParseResult[S, U]]) -> ParseResult[S, U]:
        return f(self.value, self.remaining)

    def recover(self, f: Callable[[ParseError], ParseResult[S, T]]) -> ParseResult[S, T]:
        return self

    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def rest(self) -> S:
        return self.remaining

    def error(self) -> ParseError:
        raise ErrorFromSuccessfulResult(self.value)


@dataclass(frozen=True)
class Failure(ParseResult[Any, Any]):
    # Compared through ParseError.__eq__, i.e. by code only
    reason: ParseError

    def map(self, f: Callable[[Any, Any], U]) -> ParseResult[Any, U]:
        return self

    def flat_map(self, f: Callable[[Any, Any], ParseResult[Any, U]]) -> ParseResult[Any, U]:
        return self

    def recover(self, f: Callable[[ParseError], ParseResult[Any, U]]) -> ParseResult[Any, U]:
        return f(self.reason)

    def is_success(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise UnwrappedFailedResult(self.reason)

    def rest(self) -> Any:
        raise UnwrappedFailedResult(self.reason)

    def error(self) -> ParseError:
        return self.reason
