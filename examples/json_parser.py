import json
import sys

from parsercombinator import RegexParser, between, char, lazy, literal, parse_all, spaces

# 1. Lexer helpers
def lexeme(p):
    return p << spaces()

def symbol(s):
    return lexeme(literal(s))

string_literal = lexeme(RegexParser(r'"(?:[^"\\]|\\.)*"')).map(json.loads)
number = lexeme(RegexParser(r'-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?')).map(json.loads)
null_val = symbol("null").map(lambda _: None)
true_val = symbol("true").map(lambda _: True)
false_val = symbol("false").map(lambda _: False)

# 2. Recursive JSON Parser
json_value = lazy(lambda: (
    null_val
    | true_val
    | false_val
    | string_literal
    | number
    | json_object
    | json_array
))

# [ value, value, ... ]
json_array = between(symbol("["), symbol("]"), json_value.rep(symbol(",")))

# { "key": value, ... }
entry = string_literal.keep_left(symbol(":")) & json_value
json_object = between(symbol("{"), symbol("}"), entry.rep(symbol(","))).map(dict)

parser = spaces().then(json_value)

if __name__ == "__main__":
    result = parse_all(parser, sys.stdin.read())

    if result.is_failed():
        print("Parsing Failed:", result.error())
    else:
        print("Successfully Parsed:")
        print(json.dumps(result.unwrap(), indent=4))
