"""Integer arithmetic: reverse Polish evaluation and an infix +/- calculator."""

from __future__ import annotations

import re
from collections.abc import Iterable

_OPERATORS = frozenset("+-*/")
_LEXEME_PATTERN = re.compile(r"\d+|[-+()]|\s+|.")


def _truncating_div(a: int, b: int) -> int:
    """Divide, rounding toward zero."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    return _truncating_div(left, right)


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer tokens in reverse Polish notation.

    Division truncates toward zero. The value on top of the stack once all
    tokens are consumed is returned.
    """
    stack: list[int] = []
    for item in tokens:
        if item in _OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {item!r} needs two operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(_apply(item, left, right))
        else:
            try:
                stack.append(int(item))
            except ValueError:
                raise ValueError(f"invalid token {item!r}") from None
    if not stack:
        raise ValueError("no tokens to evaluate")
    return stack[-1]


def calculate(s: str) -> int:
    """Evaluate an expression of integers, '+', '-' (also unary) and parentheses."""
    result = 0
    sign = 1
    saved: list[tuple[int, int]] = []
    for match in _LEXEME_PATTERN.finditer(s):
        lexeme = match.group()
        if lexeme.isdigit():
            result += sign * int(lexeme)
        elif lexeme == "+":
            sign = 1
        elif lexeme == "-":
            sign = -1
        elif lexeme == "(":
            saved.append((result, sign))
            result, sign = 0, 1
        elif lexeme == ")":
            if not saved:
                raise ValueError(f"unmatched ')' at position {match.start()}")
            outer, outer_sign = saved.pop()
            result = outer + outer_sign * result
            sign = 1
        elif lexeme.isspace():
            continue
        else:
            raise ValueError(f"unexpected character {lexeme!r} at position {match.start()}")
    if saved:
        raise ValueError("unmatched '('")
    return result