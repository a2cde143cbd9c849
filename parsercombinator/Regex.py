import re
from typing import AnyStr, Union

from .Errors import ErrorCode, ParseError
from .Parser import Parser
from .Result import Failure, ParseResult, Success


class DoesNotMatch(ParseError):
    code = ErrorCode.DOES_NOT_MATCH

    def __init__(self, pattern: str, input):
        super().__init__(pattern, input)
        self.pattern = pattern
        self.input = input

    def __str__(self) -> str:
        return f"{self.input[:30]!r} does not match /{self.pattern}/"


class Unimplemented(ParseError):
    """The input is not something a regular expression can scan."""
    code = ErrorCode.UNIMPLEMENTED

    def __str__(self) -> str:
        return "regular expressions only parse str or bytes input"


class RegexParser(Parser[AnyStr, AnyStr]):
    """
    Leaf parser matching a regular expression at the start of the input.

    Succeeds with the matched text and the input that follows it. An invalid
    pattern raises `re.error` here, not at parse time.
    """
    def __init__(self, regex: Union[str, bytes], flags: int = 0):
        self.regex = regex
        self.pattern: re.Pattern = re.compile(regex, flags)
        super().__init__(self._parse, f"/{regex}/")

    def _parse(self, stream: AnyStr) -> ParseResult[AnyStr, AnyStr]:
        if not isinstance(stream, type(self.pattern.pattern)):
            return Failure(Unimplemented())
        match = self.pattern.match(stream)
        if match is None:
            return Failure(DoesNotMatch(self.regex, stream))
        return Success(match.group(0), stream[match.end():])


def r(regex: Union[str, bytes], flags: int = 0) -> RegexParser:
    """Shorthand for RegexParser(regex)."""
    return RegexParser(regex, flags)
