from typing import Any, Callable, Generic, List, Optional, Tuple, Union

from .Result import ParseResult, Success, S, T, U

# Operands of or_, then and fallback may be given as a parser or as a zero-argument
# callable producing one. The callable is only invoked when the operand is
# actually needed, which lets a grammar refer to rules that are not built yet.
Deferred = Union['Parser[S, U]', Callable[[], 'Parser[S, U]']]


def _resolve(other: Deferred) -> 'Parser':
    if isinstance(other, Parser):
        return other
    parser = other()
    if not isinstance(parser, Parser):
        raise TypeError(f"deferred operand produced {type(parser).__name__}, expected Parser")
    return parser


class Parser(Generic[S, T]):
    """
    A parser wraps a pure function from an input sequence to a ParseResult.

    Any callable `input -> ParseResult` can be wrapped, so externally supplied
    leaf parsers compose with every combinator below without adaptation.
    Nothing here mutates the input: a parser only reports the suffix it did
    not consume.
    """
    def __init__(self, parse_fn: Callable[[S], ParseResult[S, T]], name: Optional[str] = None):
        self.parse_fn = parse_fn
        self.name = name

    def __call__(self, tokens: S) -> ParseResult[S, T]:
        return self.parse_fn(tokens)

    def parse(self, tokens: S) -> ParseResult[S, T]:
        return self.parse_fn(tokens)

    def named(self, name: str) -> 'Parser[S, T]':
        """Same parser under a new name (used by tracing and repr)."""
        return Parser(self.parse_fn, name)

    def __repr__(self) -> str:
        if self.name:
            return f"<Parser {self.name}>"
        return f"<Parser at {id(self):#x}>"

    # --- Transformation ---

    def map(self, f: Callable[[T], U]) -> 'Parser[S, U]':
        """Transform the parsed value, keep the remainder."""
        return Parser(lambda tokens: self(tokens).map(lambda value, _: f(value)))

    def map_with_rest(self, f: Callable[[T, S], U]) -> 'Parser[S, U]':
        """Like map, but f also receives the remainder."""
        return Parser(lambda tokens: self(tokens).map(f))

    # Monadic bind (>>=)
    def flat_map(self, f: Callable[[T], 'Parser[S, U]']) -> 'Parser[S, U]':
        """Run the parser chosen by f(value) on the remainder."""
        return Parser(lambda tokens: self(tokens).flat_map(lambda value, rest: f(value)(rest)))

    bind = flat_map

    # --- Choice ---

    # Alternative (<|>)
    def or_(self, other: Deferred) -> 'Parser[S, T]':
        """
        Ordered choice. When self fails, other is run on the same input and
        its outcome, including its error, is returned. When self succeeds,
        other is never resolved.
        """
        return Parser(lambda tokens: self(tokens).recover(lambda _: _resolve(other)(tokens)))

    def __or__(self, other: Deferred) -> 'Parser[S, T]':
        return self.or_(other)

    def fallback(self, default: Union[Deferred, T]) -> 'Parser[S, T]':
        """
        Recover from failure.

        Given a Parser, or a zero-argument callable producing one, this is
        `or_`: the parser is tried on the original input, and a callable is
        only invoked when self fails. Given any other value, the failure
        becomes a success with that value and no input consumed.
        """
        if callable(default):
            return self.or_(default)
        return Parser(lambda tokens: self(tokens).recover(lambda _: Success(default, tokens)))

    # --- Sequencing ---

    def then(self, other: Deferred) -> 'Parser[S, U]':
        """Run other on self's remainder, discarding self's value."""
        return Parser(lambda tokens: self(tokens).flat_map(lambda _, rest: _resolve(other)(rest)))

    keep_right = then

    def keep_left(self, other: Deferred) -> 'Parser[S, T]':
        """Run self then other, keeping self's value."""
        return self.flat_map(lambda value: _resolve(other).map(lambda _: value))

    def pair(self, other: Deferred) -> 'Parser[S, Tuple[T, Any]]':
        """Run self then other, producing both values as a tuple."""
        return self.flat_map(lambda left: _resolve(other).map(lambda right: (left, right)))

    # Sequence (*>) with a parser, bind (>>=) with a function of the value
    def __rshift__(self, other: Union['Parser[S, U]', Callable[[T], 'Parser[S, U]']]) -> 'Parser[S, U]':
        if isinstance(other, Parser):
            return self.then(other)
        return self.flat_map(other)

    # Sequence (<*)
    def __lshift__(self, other: Deferred) -> 'Parser[S, T]':
        return self.keep_left(other)

    # Sequence, both values
    def __and__(self, other: Deferred) -> 'Parser[S, Tuple[T, Any]]':
        return self.pair(other)

    @property
    def type_erased(self) -> 'Parser[S, None]':
        """The same parser with its value replaced by None."""
        return Parser(lambda tokens: self(tokens).map(lambda _, __: None))

    # --- Repetition ---

    def rep(self, sep: Optional[Deferred] = None) -> 'Parser[S, List[T]]':
        """
        Zero or more repetitions, collected into a list. With `sep`, the
        elements must be separated by it. Never fails.
        """
        if sep is not None:
            return self._rep_separated(sep)

        def parse(tokens: S) -> ParseResult[S, List[T]]:
            results: List[T] = []
            current = tokens
            while True:
                result = self(current)
                if result.is_failed():
                    break
                remaining = result.rest()
                # A success that consumed nothing would repeat forever
                if len(remaining) >= len(current):
                    break
                results.append(result.unwrap())
                current = remaining
            return Success(results, current)
        return Parser(parse)

    def _rep_separated(self, sep: Deferred) -> 'Parser[S, List[T]]':
        def parse(tokens: S) -> ParseResult[S, List[T]]:
            separator = _resolve(sep)
            results: List[T] = []
            current = tokens    # where the next element would start
            confirmed = tokens  # end of the last accepted element
            while True:
                element = self(current)
                if element.is_failed():
                    # A separator without a following element is left unconsumed
                    return Success(results, confirmed)
                after_element = element.rest()
                results.append(element.unwrap())

                sep_result = separator(after_element)
                if sep_result.is_failed():
                    return Success(results, after_element)
                after_sep = sep_result.rest()
                if len(after_sep) >= len(current):
                    return Success(results, after_element)
                confirmed, current = after_element, after_sep
        return Parser(parse)
