"""Infix, postfix and prefix expressions over single-character operands."""

from __future__ import annotations

import argparse
import sys
from itertools import chain
from typing import Iterator, List, Optional, Sequence

OPERATORS = "+-*/^"

# In-stack and incoming priorities for infix-to-postfix conversion.
_ISP = {"+": 2, "-": 2, "*": 4, "/": 4, "^": 5, "(": 0}
_ICP = {"+": 1, "-": 1, "*": 3, "/": 3, "^": 6, "(": 7}

# Single precedence table for infix-to-prefix conversion.
_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3, "(": 0}

_BRACKETS = {")": "(", "}": "{", "]": "[", ">": "<"}


class ExpressionError(ValueError):
    """Raised for malformed expressions or undefined arithmetic."""


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _symbols(text: str) -> Iterator[str]:
    return (ch for ch in text if not ch.isspace())


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression to postfix; ``^`` is right associative."""
    stack: List[str] = ["("]
    out: List[str] = []
    for symb in chain(_symbols(infix), ")"):
        if _is_operand(symb):
            out.append(symb)
        elif symb == ")":
            while stack and stack[-1] != "(":
                out.append(stack.pop())
            if not stack:
                raise ExpressionError(f"unmatched ')' in {infix!r}")
            stack.pop()
        elif symb in _ICP:
            while stack and _ICP[symb] <= _ISP[stack[-1]]:
                out.append(stack.pop())
            stack.append(symb)
        else:
            raise ExpressionError(f"unexpected character {symb!r} in {infix!r}")
    if stack:
        raise ExpressionError(f"unmatched '(' in {infix!r}")
    return "".join(out)


def infix_to_prefix(infix: str) -> str:
    """Convert an infix expression to prefix by scanning it in reverse."""
    swapped = {"(": ")", ")": "("}
    stack: List[str] = ["("]
    out: List[str] = []
    for ch in chain(reversed(list(_symbols(infix))), "("):
        symb = swapped.get(ch, ch)
        if _is_operand(symb):
            out.append(symb)
        elif symb == "(":
            stack.append(symb)
        elif symb == ")":
            while stack and stack[-1] != "(":
                out.append(stack.pop())
            if not stack:
                raise ExpressionError(f"unmatched '(' in {infix!r}")
            stack.pop()
        elif symb in OPERATORS:
            while stack and _PRECEDENCE[symb] < _PRECEDENCE[stack[-1]]:
                out.append(stack.pop())
            stack.append(symb)
        else:
            raise ExpressionError(f"unexpected character {ch!r} in {infix!r}")
    if stack:
        raise ExpressionError(f"unmatched ')' in {infix!r}")
    return "".join(reversed(out))


def _apply(op: str, left: int, right: int) -> int:
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if op == "/":
        if right == 0:
            raise ExpressionError("division by zero")
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient
    if right < 0:
        if left == 0:
            raise ExpressionError("zero raised to a negative power")
        return int(left**right)
    return left**right


def _pop_operands(stack: List[int], symb: str) -> tuple:
    if len(stack) < 2:
        raise ExpressionError(f"operator {symb!r} lacks operands")
    first = stack.pop()
    second = stack.pop()
    return first, second


def _single_result(stack: List[int], text: str) -> int:
    if len(stack) != 1:
        raise ExpressionError(f"expression {text!r} does not reduce to one value")
    return stack[0]


def evaluate_postfix(postfix: str) -> int:
    """Evaluate a postfix expression of single-digit operands."""
    stack: List[int] = []
    for symb in _symbols(postfix):
        if "0" <= symb <= "9":
            stack.append(int(symb))
        elif symb in OPERATORS:
            x, y = _pop_operands(stack, symb)
            stack.append(_apply(symb, y, x))
        else:
            raise ExpressionError(f"invalid symbol {symb!r} in {postfix!r}")
    return _single_result(stack, postfix)


def evaluate_prefix(prefix: str) -> int:
    """Evaluate a prefix expression of single-digit operands."""
    stack: List[int] = []
    for symb in reversed(list(_symbols(prefix))):
        if "0" <= symb <= "9":
            stack.append(int(symb))
        elif symb in OPERATORS:
            a, b = _pop_operands(stack, symb)
            stack.append(_apply(symb, a, b))
        else:
            raise ExpressionError(f"invalid symbol {symb!r} in {prefix!r}")
    return _single_result(stack, prefix)


def brackets_balanced(text: str) -> bool:
    """Report whether (), {}, [] and <> pair up and nest properly."""
    stack: List[str] = []
    openers = set(_BRACKETS.values())
    for symb in text:
        if symb in openers:
            stack.append(symb)
        elif symb in _BRACKETS:
            if not stack or stack.pop() != _BRACKETS[symb]:
                return False
    return not stack


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert an infix expression to postfix and prefix."
    )
    parser.add_argument("expression", help="infix expression, e.g. 2+3*4")
    args = parser.parse_args(argv)
    if not brackets_balanced(args.expression):
        print("unbalanced")
        return 1
    try:
        postfix = infix_to_postfix(args.expression)
        prefix = infix_to_prefix(args.expression)
    except ExpressionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"postfix: {postfix}")
    print(f"prefix: {prefix}")
    try:
        print(f"value = {evaluate_postfix(postfix)}")
    except ExpressionError as exc:
        print(f"value unavailable: {exc}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())