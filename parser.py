"""Infix text to postfix tokens.

Three stages, each taking a token list and returning a fresh one:

>>> infix = mark_unary(tokenize("-(1 + 2) * 3"))
>>> format_tokens(infix)
'u- ( 1 + 2 ) * 3'
>>> format_tokens(parse(infix))
'1 2 + u- 3 *'
"""
import logging
import re

from errors import UnexpectedCharacter, UnmatchedClosingParen, UnmatchedOpeningParen
from tokens import (
    LPAREN,
    PLUS,
    SYMBOLS,
    UNARY_MINUS,
    UNARY_PLUS,
    Kind,
    Number,
    format_tokens,
    is_number,
    is_operator,
)

logger = logging.getLogger(__name__)

number_rex = re.compile(r"[0-9]+(?:\.[0-9]*)?")


def tokenize(text, strict=False):
    """Split `text` into numbers and operators.

    Whitespace is skipped. So is anything else that isn't a digit or one of
    `+-*/()`, unless `strict` is set, in which case it is an error.

    >>> format_tokens(tokenize(" 1 +  12.34  "))
    '1 + 12.34'
    >>> tokenize("1 ? 2", strict=True)
    Traceback (most recent call last):
    ...
    errors.UnexpectedCharacter: unexpected character '?' at position 2
    """
    tokens = []
    pos = 0
    while pos < len(text):
        if m := number_rex.match(text, pos):
            tokens.append(Number(float(m.group())))
            pos = m.end()
            continue
        char = text[pos]
        if op := SYMBOLS.get(char):
            tokens.append(op)
        elif not char.isspace():
            if strict:
                raise UnexpectedCharacter(char, pos)
            logger.debug("skipping %r at position %d", char, pos)
        pos += 1
    return tokens


def mark_unary(tokens):
    """Replace `+`/`-` in operand position by their unary counterparts.

    An operand can start at the beginning of the input and after any operator
    except `)`.

    >>> format_tokens(mark_unary(tokenize("1 - -2")))
    '1 - u- 2'
    >>> format_tokens(mark_unary(tokenize("-+(1)")))
    'u- u+ ( 1 )'
    """
    marked = []
    expect_operand = True
    for token in tokens:
        if is_number(token):
            expect_operand = False
        elif is_operator(token, Kind.PLUS, Kind.MINUS):
            if expect_operand:
                token = UNARY_PLUS if token == PLUS else UNARY_MINUS
            expect_operand = True
        else:
            expect_operand = token.kind != Kind.RPAREN
        marked.append(token)
    return marked


PRECEDENCE = {
    Kind.UNARY_PLUS: 2,
    Kind.UNARY_MINUS: 2,
    Kind.MUL: 1,
    Kind.DIV: 1,
    Kind.PLUS: 0,
    Kind.MINUS: 0,
    Kind.LPAREN: 0,
    Kind.RPAREN: 0,
}


def precedence(op):
    return PRECEDENCE[op.kind]


def parse(tokens):
    """Reorder marked infix `tokens` into postfix (shunting-yard).

    Binary operators are left-associative; unary minus binds tighter than
    everything else and unary plus is dropped altogether.

    >>> format_tokens(parse(mark_unary(tokenize("1 + 2 * 3"))))
    '1 2 3 * +'
    >>> format_tokens(parse(mark_unary(tokenize("1 - 2 - 3"))))
    '1 2 - 3 -'
    >>> parse(tokenize("(1 + 2"))
    Traceback (most recent call last):
    ...
    errors.UnmatchedClosingParen: missing ')' for '(' in: ( 1 + 2
    """
    output = []
    ops = []
    for token in tokens:
        if is_number(token):
            output.append(token)
        elif token.kind == Kind.LPAREN:
            ops.append(token)
        elif token.kind == Kind.RPAREN:
            while ops and ops[-1] != LPAREN:
                output.append(ops.pop())
            if not ops:
                raise UnmatchedOpeningParen(
                    f"')' without matching '(' in: {format_tokens(tokens)}"
                )
            ops.pop()
        elif token.kind == Kind.UNARY_PLUS:
            pass
        elif token.kind == Kind.UNARY_MINUS:
            ops.append(token)
        else:
            while (
                ops and ops[-1] != LPAREN and precedence(ops[-1]) >= precedence(token)
            ):
                output.append(ops.pop())
            ops.append(token)
    while ops:
        if (op := ops.pop()) == LPAREN:
            raise UnmatchedClosingParen(
                f"missing ')' for '(' in: {format_tokens(tokens)}"
            )
        output.append(op)
    return output
