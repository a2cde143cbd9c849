import logging

from parsercombinator import (
    RegexParser, char, chainl1, lazy, parse_all, parser_traced, spaces
)

# 1. Tokens: every token swallows the whitespace that follows it
def lexeme(p):
    return p << spaces()

integer = lexeme(RegexParser("[0-9]+")).map(int)

def symbol(c):
    return lexeme(char(c))

# 2. Helper Functions for the Calculation
def add(x, y): return x + y
def sub(x, y): return x - y
def mul(x, y): return x * y
def div(x, y):
    if y == 0: raise ValueError("Division by zero")
    return x / y

add_op = symbol("+").map(lambda _: add) | symbol("-").map(lambda _: sub)
mul_op = symbol("*").map(lambda _: mul) | symbol("/").map(lambda _: div)

# 3. Grammar. `expression` refers to itself through `factor`, so the
# parenthesised branch is deferred with a lambda.
factor = integer | (lambda: symbol("(").then(expression).keep_left(symbol(")")))
term = chainl1(factor, mul_op)
expression = lazy(lambda: chainl1(term, add_op))

parser = parser_traced("expression", spaces().then(expression))

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    test_cases = [
        "2 + 3",            # 5
        "2 + 3 * 4",        # 14 (Precedence check)
        "(2 + 3) * 4",      # 20 (Parens check)
        "10 / 2 + 3",       # 8.0
        "2 +",              # Leftover input
        "10 / (2 - 2)",     # Runtime error
    ]

    for expr_str in test_cases:
        try:
            result = parse_all(parser, expr_str)
            if result.is_success():
                print(f"{expr_str:<20} | {result.unwrap()}")
            else:
                print(f"{expr_str:<20} | Error: {result.error()}")
        except ValueError as e:
            print(f"{expr_str:<20} | Runtime Error: {e}")
