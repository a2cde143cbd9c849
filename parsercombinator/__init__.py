# Core
from .Result import ParseResult, Success, Failure
from .Errors import (
    ErrorCode, ParseError, Message, UnexpectedToken, UnexpectedEnd, UnconsumedInput,
    ResultAccessError, UnwrappedFailedResult, ErrorFromSuccessfulResult
)
from .Parser import Parser
from .Prim import pure, fail, fail_with, lazy, token, tokens, look_ahead, run_parser, parse_all

# Characters
from .Char import (
    satisfy, char, literal, string, one_of, none_of,
    any_char, space, spaces, letter, digit, digits
)

# Regular expressions
from .Regex import RegexParser, DoesNotMatch, Unimplemented, r

# Combinators
from .Combinators import (
    choice, count, between, option, option_maybe, optional,
    many, many1, sep_by, sep_by1, chainl1, chainr1,
    eof, not_followed_by, many_till,
    parser_trace, parser_traced
)
