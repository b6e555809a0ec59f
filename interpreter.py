"""Evaluate arithmetic expressions: text -> tokens -> postfix -> float.

Arithmetic is done on numpy doubles, so division by zero and overflow give
IEEE infinities and NaNs rather than Python exceptions.

>>> interpret("(4+1)*2/(4/(3-1))")
5.0
>>> interpret("1/0"), interpret("-1/0")
(inf, -inf)
"""
import argparse
import logging
import os
import sys

import numpy as np

from errors import (
    InsufficientOperands,
    InterpreterError,
    MalformedExpression,
    UnknownOperator,
)
from parser import mark_unary, parse, tokenize
from tokens import Kind, format_tokens, is_number

logger = logging.getLogger(__name__)

BINARY = {
    Kind.PLUS: np.add,
    Kind.MINUS: np.subtract,
    Kind.MUL: np.multiply,
    Kind.DIV: np.divide,
}
UNARY = {
    Kind.UNARY_MINUS: np.negative,
}


def evaluate(tokens, strict=False):
    """Run postfix `tokens` on a stack machine and return the top value.

    An empty sequence evaluates to 0.0. Values left below the top are ignored,
    unless `strict` is set:

    >>> evaluate(tokenize("1 2"))
    2.0
    >>> evaluate(tokenize("1 2"), strict=True)
    Traceback (most recent call last):
    ...
    errors.MalformedExpression: 2 values left on the stack, expected 1
    """
    stack = []

    def pop_operands(op, n):
        if len(stack) < n:
            raise InsufficientOperands(
                f"{op} needs {n} operand(s), got {len(stack)}"
                f" in: {format_tokens(tokens)}"
            )
        operands = stack[-n:]
        del stack[-n:]
        return operands

    with np.errstate(all="ignore"):
        for token in tokens:
            if is_number(token):
                stack.append(np.float64(token.value))
            elif fun := BINARY.get(token.kind):
                stack.append(fun(*pop_operands(token, 2)))
            elif fun := UNARY.get(token.kind):
                stack.append(fun(*pop_operands(token, 1)))
            else:
                raise UnknownOperator(f"no evaluation rule for {token}")
    if not stack:
        return 0.0
    if strict and len(stack) > 1:
        raise MalformedExpression(f"{len(stack)} values left on the stack, expected 1")
    return float(stack[-1])


def interpret(text, strict=False):
    """Evaluate the infix expression `text`.

    `strict` rejects unknown characters and leftover operands instead of
    ignoring them.

    >>> interpret("1 + 2")
    3.0
    >>> interpret("1 $+ 2")
    3.0
    >>> interpret("1 $+ 2", strict=True)
    Traceback (most recent call last):
    ...
    errors.UnexpectedCharacter: unexpected character '$' at position 2
    """
    tokens = tokenize(text, strict=strict)
    logger.debug("tokens: %s", format_tokens(tokens))
    infix = mark_unary(tokens)
    logger.debug("infix: %s", format_tokens(infix))
    postfix = parse(infix)
    logger.debug("postfix: %s", format_tokens(postfix))
    return evaluate(postfix, strict=strict)


def main(argv=None):
    arg_parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    arg_parser.add_argument("expression", nargs="+")
    arg_parser.add_argument(
        "--strict",
        action="store_true",
        help="reject unknown characters and dangling operands",
    )
    args = arg_parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if os.getenv("DEBUG") else logging.WARNING,
        format="%(name)s: %(message)s",
    )
    try:
        print(interpret(" ".join(args.expression), strict=args.strict))
    except InterpreterError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
