import logging
from functools import reduce
from typing import Any, Callable, List, Optional, Sequence, Tuple

from .Errors import Message, UnconsumedInput, UnexpectedToken
from .Parser import Parser
from .Prim import fail, pure
from .Result import Failure, ParseResult, Success, S, T

logger = logging.getLogger(__name__)

OpFuncType = Callable[[T, T], T]  # Binary operator returned by the op parser of chainl1/chainr1


# 1. choice: Tries parsers in order until one succeeds
def choice(parsers: Sequence[Parser[S, T]]) -> Parser[S, T]:
    """
    Applies a list of parsers in order until one succeeds. When all of them
    fail, the error of the last one is reported.
    """
    if not parsers:
        return fail("no alternatives")
    return reduce(lambda acc, p: acc | p, parsers[1:], parsers[0])


# 2. count: Parses n occurrences of a parser
def count(n: int, p: Parser[S, T]) -> Parser[S, List[T]]:
    """Parses exactly n occurrences of p. Fails with p's error if fewer are found."""
    if n <= 0:
        return pure([])

    def parse(stream: S) -> ParseResult[S, List[T]]:
        results: List[T] = []
        current = stream
        for _ in range(n):
            res = p(current)
            if res.is_failed():
                return res
            results.append(res.unwrap())
            current = res.rest()
        return Success(results, current)
    return Parser(parse)


# 3. between: Parses an opening parser, a main parser, and a closing parser
def between(open: Parser[S, Any], close: Parser[S, Any], p: Parser[S, T]) -> Parser[S, T]:
    """Parses `open`, then `p`, then `close`, returning the result of `p`."""
    return open.then(p).keep_left(close)


# 4. option: Tries a parser, returning a default value on failure
def option(x: T, p: Parser[S, T]) -> Parser[S, T]:
    return p.fallback(x)


# 5. option_maybe: None when p fails
def option_maybe(p: Parser[S, T]) -> Parser[S, Optional[T]]:
    return p.fallback(None)


# 6. optional: Tries a parser, discarding the result
def optional(p: Parser[S, Any]) -> Parser[S, None]:
    return p.type_erased.fallback(None)


# 7. many / many1: zero-or-more and one-or-more repetitions
def many(p: Parser[S, T]) -> Parser[S, List[T]]:
    return p.rep()


def many1(p: Parser[S, T]) -> Parser[S, List[T]]:
    """
    Applies parser p one or more times, returning a list of results.
    """
    return p.flat_map(lambda x: p.rep().map(lambda xs: [x] + xs))


# 8. sep_by / sep_by1: occurrences separated by sep
def sep_by(p: Parser[S, T], sep: Parser[S, Any]) -> Parser[S, List[T]]:
    """
    Zero or more p separated by sep. A separator that is not followed by
    another p is left in the input.
    """
    return p.rep(sep)


def sep_by1(p: Parser[S, T], sep: Parser[S, Any]) -> Parser[S, List[T]]:
    """Like sep_by, but fails with p's error when not even one p is found."""
    return p.flat_map(lambda x: sep.then(p).rep().map(lambda xs: [x] + xs))


# 9. chainl1: Left-associative operator chain
def chainl1(p: Parser[S, T], op: Parser[S, OpFuncType]) -> Parser[S, T]:
    """
    Parses one or more p separated by op, applying op left-associatively.
    An op that is not followed by a p ends the chain and is not consumed.
    """
    def fold(first: T, rest: List[Tuple[OpFuncType, T]]) -> T:
        return reduce(lambda acc, pair: pair[0](acc, pair[1]), rest, first)

    return p.flat_map(lambda first: op.pair(p).rep().map(lambda rest: fold(first, rest)))


# 10. chainr1: Right-associative operator chain
def chainr1(p: Parser[S, T], op: Parser[S, OpFuncType]) -> Parser[S, T]:
    """Parses one or more p separated by op, applying op right-associatively."""
    def fold(first: T, rest: List[Tuple[OpFuncType, T]]) -> T:
        if not rest:
            return first
        # [x0, (f1, x1), (f2, x2)] -> f1(x0, f2(x1, x2))
        operands = [first] + [x for _, x in rest]
        acc = operands[-1]
        for i in range(len(rest) - 1, -1, -1):
            acc = rest[i][0](operands[i], acc)
        return acc

    return p.flat_map(lambda first: op.pair(p).rep().map(lambda rest: fold(first, rest)))


# 11. eof: Succeeds only at the end of input
def eof() -> Parser[S, None]:
    def parse(stream: S) -> ParseResult[S, None]:
        if len(stream):
            return Failure(UnconsumedInput(stream))
        return Success(None, stream)
    return Parser(parse, "end of input")


# 12. not_followed_by: Succeeds if p fails, never consumes
def not_followed_by(p: Parser[S, Any]) -> Parser[S, None]:
    def parse(stream: S) -> ParseResult[S, None]:
        res = p(stream)
        if res.is_success():
            return Failure(UnexpectedToken(res.unwrap()))
        return Success(None, stream)
    return Parser(parse, f"not followed by {p!r}")


# 13. many_till: Parses p zero or more times until end succeeds
def many_till(p: Parser[S, T], end: Parser[S, Any]) -> Parser[S, List[T]]:
    """
    Applies p zero or more times until end succeeds, returning p's results.
    `end` is consumed. Fails with p's error if p fails before end matches,
    and with a Message if p succeeds without consuming input.
    """
    def parse(stream: S) -> ParseResult[S, List[T]]:
        results: List[T] = []
        current = stream
        while True:
            closing = end(current)
            if closing.is_success():
                return closing.map(lambda _, __: results)
            item = p(current)
            if item.is_failed():
                return item
            if len(item.rest()) >= len(current):
                return Failure(Message("many_till: parser succeeded without consuming input"))
            results.append(item.unwrap())
            current = item.rest()
    return Parser(parse)


# 14. parser_trace: Logs the remaining input, consumes nothing
def parser_trace(label_str: str) -> Parser[S, None]:
    def parse(stream: S) -> ParseResult[S, None]:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s: %r%s", label_str, stream[:30], "..." if len(stream) > 30 else "")
        return Success(None, stream)
    return Parser(parse, f"trace {label_str}")


# 15. parser_traced: Logs entry into p and backtracking out of it
def parser_traced(label_str: str, p: Parser[S, T]) -> Parser[S, T]:
    def attempt(stream: S) -> ParseResult[S, T]:
        res = p(stream)
        if res.is_failed():
            logger.debug("%s backtracked: %s", label_str, res.error())
        return res
    return parser_trace(label_str).then(Parser(attempt, label_str))
