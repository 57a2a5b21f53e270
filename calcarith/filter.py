"""Replacement of arithmetic expressions embedded in text."""

from __future__ import annotations

import re

from calcarith.evaluator import evaluate

_SPACE = r"[\t\n\f\r ]"
_EXPRESSION = re.compile(
    rf"\(*[0-9]+({_SPACE}*[-+*/]{_SPACE}*[()]*{_SPACE}*[0-9]+\)*)+"
)


def replace_math_expressions(text: str) -> str:
    """Replace every arithmetic expression found in text with its value."""
    return _EXPRESSION.sub(lambda match: str(evaluate(match.group())), text)