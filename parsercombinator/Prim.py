from typing import Any, Callable, Optional, Sequence, Tuple

from .Errors import Message, ParseError, UnconsumedInput, UnexpectedEnd, UnexpectedToken
from .Parser import Parser
from .Result import Failure, ParseResult, Success, S, T


def pure(value: T) -> Parser[Any, T]:
    """Return a parser that succeeds with a value without consuming input."""
    def parse(tokens: S) -> ParseResult[S, T]:
        return Success(value, tokens)
    return Parser(parse)


def fail(msg: str) -> Parser[Any, Any]:
    """A parser that always fails with a message."""
    def parse(tokens: S) -> ParseResult[S, Any]:
        return Failure(Message(msg))
    return Parser(parse)


def fail_with(error: ParseError) -> Parser[Any, Any]:
    """A parser that always fails with the given error."""
    return Parser(lambda tokens: Failure(error))


def lazy(thunk: Callable[[], Parser[S, T]]) -> Parser[S, T]:
    """
    Defer building a parser until it is first run.

    Needed for recursive rules: `expr = lazy(lambda: term | parens(expr))`.
    The built parser is cached, so the thunk runs at most once.
    """
    cache = []

    def parse(tokens: S) -> ParseResult[S, T]:
        if not cache:
            cache.append(thunk())
        return cache[0](tokens)
    return Parser(parse)


def token(test_tok: Callable[[Any], Optional[T]], expected: Any = None) -> Parser[S, T]:
    """
    Parse a single element of the input when test_tok returns a value for it.

    Works on any sliceable sequence: characters of a str, ints of bytes,
    objects of a list of lexer tokens.
    """
    def parse(tokens: S) -> ParseResult[S, T]:
        if not tokens:
            return Failure(UnexpectedEnd(expected))
        tok = tokens[0]
        value = test_tok(tok)
        if value is None:
            return Failure(UnexpectedToken(tok, expected))
        return Success(value, tokens[1:])
    return Parser(parse)


def tokens(expected: Sequence[Any]) -> Parser[S, Any]:
    """Match `expected` as a prefix of the input and return the matched slice."""
    size = len(expected)

    def parse(stream: S) -> ParseResult[S, Any]:
        if not size:  # Matching an empty sequence always succeeds, consumes nothing
            return Success(stream[:0], stream)
        prefix = stream[:size]
        if list(prefix) == list(expected):
            return Success(prefix, stream[size:])
        if len(prefix) < size and list(prefix) == list(expected[:len(prefix)]):
            return Failure(UnexpectedEnd(expected))
        return Failure(UnexpectedToken(prefix, expected))
    return Parser(parse)


def look_ahead(parser: Parser[S, T]) -> Parser[S, T]:
    """Parse without consuming input."""
    def parse(stream: S) -> ParseResult[S, T]:
        return parser(stream).flat_map(lambda value, _: Success(value, stream))
    return Parser(parse)


def run_parser(parser: Parser[S, T], stream: S) -> Tuple[Optional[T], Optional[ParseError]]:
    """Run a parser, returning (value, None) on success and (None, error) on failure."""
    result = parser(stream)
    if result.is_success():
        return result.unwrap(), None
    return None, result.error()


def parse_all(parser: Parser[S, T], stream: S) -> ParseResult[S, T]:
    """Run a parser and fail with UnconsumedInput unless it consumes everything."""
    def check(value: T, rest: S) -> ParseResult[S, T]:
        if len(rest):
            return Failure(UnconsumedInput(rest))
        return Success(value, rest)
    return parser(stream).flat_map(check)

