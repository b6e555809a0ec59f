"""Tokens flowing between the interpreter stages.

A token is either a `Number` or an `Operator`. Both are immutable named
tuples, so they compare and hash by value:

>>> Number(1) == Number(1.0)
True
>>> Operator(Kind.PLUS) == PLUS
True
>>> Number(1.0) == PLUS
False
>>> format_tokens([Number(1), PLUS, Number(2.5)])
'1 + 2.5'
"""
from enum import Enum
from typing import List, NamedTuple, Union


class Kind(Enum):
    PLUS = "+"
    MINUS = "-"
    MUL = "*"
    DIV = "/"
    LPAREN = "("
    RPAREN = ")"
    # Only ever produced by `parser.mark_unary`.
    UNARY_PLUS = "u+"
    UNARY_MINUS = "u-"

    def __repr__(self):
        return f"Kind.{self.name}"


def canonicalize_num(num):
    return repr(integer if (integer := int(num)) == num else num)


class Number(NamedTuple):
    value: float

    def __repr__(self):
        return f"Number({self.value!r})"

    def __str__(self):
        try:
            return canonicalize_num(self.value)
        except (OverflowError, ValueError):  # inf, nan
            return repr(self.value)


class Operator(NamedTuple):
    kind: Kind

    def __repr__(self):
        return f"Operator({self.kind!r})"

    def __str__(self):
        return self.kind.value


Token = Union[Number, Operator]
Tokens = List[Token]

PLUS = Operator(Kind.PLUS)
MINUS = Operator(Kind.MINUS)
MUL = Operator(Kind.MUL)
DIV = Operator(Kind.DIV)
LPAREN = Operator(Kind.LPAREN)
RPAREN = Operator(Kind.RPAREN)
UNARY_PLUS = Operator(Kind.UNARY_PLUS)
UNARY_MINUS = Operator(Kind.UNARY_MINUS)

# Source spelling -> token, for the characters the tokenizer recognizes.
SYMBOLS = {str(op): op for op in (PLUS, MINUS, MUL, DIV, LPAREN, RPAREN)}


def is_number(token):
    return type(token) is Number


def is_operator(token, *kinds):
    """True if `token` is an operator, and, if `kinds` are given, one of them."""
    return type(token) is Operator and (not kinds or token.kind in kinds)


def format_tokens(tokens):
    return " ".join(map(str, tokens))
