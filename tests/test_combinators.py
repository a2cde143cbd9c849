import logging

from hypothesis import given, strategies as st

from parsercombinator import (
    Failure, Message, Success, UnconsumedInput, UnexpectedToken,
    any_char, char, digit, digits, literal, look_ahead, parse_all, run_parser,
    between, chainl1, chainr1, choice, count, eof, many, many1, many_till,
    not_followed_by, option, option_maybe, optional, parser_trace, pure,
    parser_traced, sep_by, sep_by1
)


def run(parser, input_str):
    return run_parser(parser, input_str)

# --- Choice ---

def test_choice_basic():
    # Matches first available
    p = choice([char('a'), char('b'), char('c')])
    assert run(p, "a")[0] == "a"
    assert run(p, "b")[0] == "b"
    assert run(p, "c")[0] == "c"

    # Fails with the error of the last alternative
    res, err = run(p, "d")
    assert res is None
    assert err.expected == "c"

def test_choice_empty():
    res, err = run(choice([]), "input")
    assert res is None
    assert "no alternatives" in str(err)

# --- Count ---

@given(st.integers(min_value=0, max_value=20))
def test_count(n):
    input_str = "a" * n + "b"
    p = count(n, char('a'))
    assert p(input_str) == Success(['a'] * n, "b")

def test_count_fail():
    # Expect 3, get 2
    res, err = run(count(3, char('a')), "aa")
    assert res is None
    assert err is not None

# --- Option / Between ---

def test_option():
    p = option("default", literal("foo"))
    assert run(p, "foo")[0] == "foo"
    assert p("bar") == Success("default", "bar")

def test_option_maybe():
    p = option_maybe(char('a'))
    assert run(p, "a")[0] == 'a'
    assert p("b") == Success(None, "b")

def test_optional():
    p = optional(char('a'))
    assert p("ab") == Success(None, "b")
    assert p("b") == Success(None, "b")

def test_between():
    p = between(char('('), char(')'), literal("foo"))
    assert p("(foo)") == Success("foo", "")

    # Fail closing
    res_fail, _ = run(p, "(foo")
    assert res_fail is None

# --- Repetition ---

def test_many():
    assert many(char('a'))("aab") == Success(['a', 'a'], "b")

def test_many1():
    p = many1(char('a'))
    assert run(p, "aaa")[0] == ['a', 'a', 'a']
    assert run(p, "a")[0] == ['a']

    # Fails on 0
    res, _ = run(p, "b")
    assert res is None

def test_sep_by():
    p = sep_by(char('a'), char(','))

    assert run(p, "a,a,a")[0] == ['a', 'a', 'a']
    assert run(p, "a")[0] == ['a']
    assert run(p, "")[0] == []  # Zero matches is ok for sep_by

def test_sep_by1():
    p = sep_by1(digits(), char(','))
    assert p("1,2,") == Success([1, 2], ",")
    assert p("1,,3") == Success([1], ",,3")
    assert run(p, "")[0] is None  # Must have at least one

# --- Expression Chains (Associativity) ---

def test_chainl1_associativity():
    # Subtraction is Left Associative: 9 - 3 - 2
    # (9 - 3) - 2 = 4
    # NOT 9 - (3 - 2) = 8

    def sub(x, y): return x - y

    num = digit().map(int)
    op = char('-').map(lambda _: sub)

    expr = chainl1(num, op)

    res, _ = run(expr, "9-3-2")
    assert res == 4

def test_chainl1_leaves_dangling_operator():
    op = char('+').map(lambda _: lambda x, y: x + y)
    assert chainl1(digits(), op)("1+2+") == Success(3, "+")

def test_chainr1_associativity():
    # Power is Right Associative: 2 ^ 3 ^ 2
    # 2 ^ (3 ^ 2) = 2 ^ 9 = 512
    # NOT (2 ^ 3) ^ 2 = 8 ^ 2 = 64

    def power(x, y): return x ** y

    num = digit().map(int)
    op = char('^').map(lambda _: power)

    expr = chainr1(num, op)

    res, _ = run(expr, "2^3^2")
    assert res == 512
    assert run(expr, "7")[0] == 7

# --- EOF / Not Followed By / Look Ahead ---

def test_eof():
    p = char('a') >> (lambda _: eof())

    assert p("a") == Success(None, "")

    res, err = run(p, "ab")
    assert res is None
    assert isinstance(err, UnconsumedInput)
    assert err.remaining == "b"

def test_not_followed_by():
    # Keyword 'let' cannot be followed by 's' (e.g. 'lets')
    keyword_let = literal("let") << not_followed_by(char('s'))

    assert keyword_let("let ") == Success("let", " ")

    res, err = run(keyword_let, "lets")
    assert res is None
    assert isinstance(err, UnexpectedToken)

def test_look_ahead():
    p = look_ahead(literal("ab"))
    assert p("abc") == Success("ab", "abc")
    assert p("x").is_failed()

def test_many_till():
    # Parsing comment: <!-- content -->
    p = literal("<!--") >> many_till(any_char(), literal("-->"))

    input_str = "<!--hello world-->rest"
    res = p(input_str)
    assert "".join(res.unwrap()) == "hello world"
    assert res.rest() == "rest"

    # Unterminated comment
    assert p("<!--hello").is_failed()

def test_many_till_rejects_parser_that_consumes_nothing():
    res = many_till(pure(1), char('x'))("abc")
    assert res.is_failed()
    assert isinstance(res.error(), Message)
    assert "without consuming" in str(res.error())

    # end still wins before p is tried
    assert many_till(pure(1), char('x'))("xbc") == Success([], "bc")

# --- Running ---

def test_run_parser():
    assert run_parser(digits(), "12") == (12, None)
    value, err = run_parser(digits(), "x")
    assert value is None
    assert isinstance(err, UnexpectedToken)

def test_parse_all():
    assert parse_all(digits(), "12") == Success(12, "")
    res = parse_all(digits(), "12x")
    assert res == Failure(UnconsumedInput("x"))
    assert res.error().remaining == "x"
    assert parse_all(digits(), "x") == Failure(UnexpectedToken("x"))

# --- Tracing ---

def test_parser_trace_logs_and_consumes_nothing(caplog):
    caplog.set_level(logging.DEBUG, logger="parsercombinator.Combinators")
    p = parser_trace("start") >> digits()

    assert p("42") == Success(42, "")
    assert "start: '42'" in caplog.text

def test_parser_traced_logs_backtracking(caplog):
    caplog.set_level(logging.DEBUG, logger="parsercombinator.Combinators")
    p = parser_traced("num", digits()) | literal("x")

    assert p("x") == Success("x", "")
    assert "num backtracked" in caplog.text

def test_parser_traced_is_transparent():
    p = parser_traced("num", digits())
    assert p("12a") == digits()("12a")
    assert p("a") == Failure(UnexpectedToken("a"))
