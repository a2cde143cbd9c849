from typing import Callable, Iterable, List, Optional

from .Errors import UnexpectedEnd, UnexpectedToken
from .Parser import Parser
from .Prim import tokens
from .Result import Failure, ParseResult, Success


# Core function: Succeeds if the character satisfies a predicate
def satisfy(f: Callable[[str], bool], expected: Optional[str] = None) -> Parser[str, str]:
    """Succeeds for any character where f returns True. Returns the parsed character."""
    def parse(stream: str) -> ParseResult[str, str]:
        if not stream:
            return Failure(UnexpectedEnd(expected))
        c = stream[0]
        if f(c):
            return Success(c, stream[1:])
        return Failure(UnexpectedToken(c, expected))
    return Parser(parse, expected)


def char(c: str) -> Parser[str, str]:
    """Parses a single character c and returns it."""
    return satisfy(lambda x: x == c, c)


def literal(s: str) -> Parser[str, str]:
    """Parses the exact string s and returns it."""
    return tokens(s).named(repr(s))


string = literal


def one_of(cs: Iterable[str]) -> Parser[str, str]:
    """Succeeds if the current character is in cs."""
    cs = ''.join(cs)
    return satisfy(lambda c: c in cs, f"one of {cs}")


def none_of(cs: Iterable[str]) -> Parser[str, str]:
    """Succeeds if the current character is not in cs."""
    cs = ''.join(cs)
    return satisfy(lambda c: c not in cs, f"none of {cs}")


def any_char() -> Parser[str, str]:
    return satisfy(lambda _: True, "any character")


def space() -> Parser[str, str]:
    return satisfy(str.isspace, "space")


def spaces() -> Parser[str, None]:
    """Skips zero or more whitespace characters."""
    return space().rep().type_erased


def letter() -> Parser[str, str]:
    return satisfy(str.isalpha, "letter")


def digit() -> Parser[str, str]:
    """Parses an ASCII digit and returns it."""
    return satisfy(lambda c: c in '0123456789', "digit")


def digits() -> Parser[str, int]:
    """
    One or more ASCII digits, as an int. Stops at the first non-digit:
    "12a4" gives 12 with "a4" left over.
    """
    def to_int(ds: List[str]) -> int:
        return int(''.join(ds))
    return digit().flat_map(lambda first: digit().rep().map(lambda rest: to_int([first] + rest)))
