# tests/conftest.py
import pytest

from parsercombinator import Parser, ParseResult, Success, char, digits


def assert_result_eq(res1: ParseResult, res2: ParseResult):
    """
    Comparison of two ParseResults with a readable message. Failures compare
    by error code only, like ParseResult.__eq__.
    """
    assert res1.is_success() == res2.is_success(), f"Reply mismatch: {res1!r} vs {res2!r}"
    if res1.is_success():
        assert res1.unwrap() == res2.unwrap()
        assert res1.rest() == res2.rest()
    else:
        assert res1.error().code == res2.error().code


@pytest.fixture
def number() -> Parser:
    return digits()


@pytest.fixture
def comma() -> Parser:
    return char(',')


@pytest.fixture
def counting():
    """Wraps a parser so tests can see how many times it was run or built."""
    def _make(parser: Parser):
        calls = []

        def parse(tokens):
            calls.append(tokens)
            return parser(tokens)
        return Parser(parse), calls

    return _make
