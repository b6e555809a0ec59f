"""Errors raised by the interpreter pipeline.

All of them are `ValueError`s: a malformed expression is bad input, not a
transient condition, so nothing here is retried or recovered from.
"""


class InterpreterError(ValueError):
    """Base class; `kind` names the error so callers can branch on it."""

    @property
    def kind(self):
        return type(self).__name__


class UnexpectedCharacter(InterpreterError):
    def __init__(self, char, position):
        super().__init__(f"unexpected character {char!r} at position {position}")
        self.char = char
        self.position = position


class ParseError(InterpreterError):
    pass


class UnmatchedOpeningParen(ParseError):
    """A `)` was reached with no `(` left on the operator stack."""


class UnmatchedClosingParen(ParseError):
    """The input ran out while a `(` was still on the operator stack."""


class EvaluationError(InterpreterError):
    pass


class InsufficientOperands(EvaluationError):
    pass


class UnknownOperator(EvaluationError):
    pass


class MalformedExpression(EvaluationError):
    pass
