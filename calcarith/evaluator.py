"""Evaluation of integer arithmetic expressions."""

from __future__ import annotations

import re

_SCANNER = re.compile(
    r"(?P<number>[0-9]+)|(?P<space>\s+)|(?P<symbol>[-+*/()])|(?P<other>.)",
    re.DOTALL,
)

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}


def _divide(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATIONS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _divide,
}


def _reduce(numbers: list[int], operators: list[str]) -> None:
    """Apply the operator on top of the stack to the two topmost numbers."""
    operator = operators.pop()
    if operator == "(":
        raise ValueError("unbalanced '(' in expression")
    if len(numbers) < 2:
        raise ValueError(f"missing operand for {operator!r}")
    right = numbers.pop()
    left = numbers.pop()
    numbers.append(_OPERATIONS[operator](left, right))


def evaluate(expr: str) -> int:
    """Evaluate an expression of non-negative integers, + - * /, and parentheses.

    Division truncates toward zero. Raises ValueError on a malformed
    expression and ZeroDivisionError on division by zero.
    """
    numbers: list[int] = []
    operators: list[str] = []

    for match in _SCANNER.finditer(expr):
        kind = match.lastgroup
        lexeme = match.group()
        if kind == "space":
            continue
        if kind == "other":
            raise ValueError(f"unexpected character {lexeme!r} in expression")
        if kind == "number":
            numbers.append(int(lexeme))
        elif lexeme == "(":
            operators.append(lexeme)
        elif lexeme == ")":
            while operators and operators[-1] != "(":
                _reduce(numbers, operators)
            if not operators:
                raise ValueError("unbalanced ')' in expression")
            operators.pop()
        else:
            while (
                operators
                and operators[-1] != "("
                and _PRECEDENCE[operators[-1]] >= _PRECEDENCE[lexeme]
            ):
                _reduce(numbers, operators)
            operators.append(lexeme)

    while operators:
        _reduce(numbers, operators)

    if len(numbers) != 1:
        raise ValueError(f"malformed expression: {expr!r}")
    return numbers[0]