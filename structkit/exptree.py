"""Expression trees built from postfix strings of single-digit operands."""

from __future__ import annotations

import argparse
import operator
import string
import sys
from collections.abc import Callable
from dataclasses import dataclass


class ExpressionError(ValueError):
    """Raised for a malformed postfix expression."""


def _trunc_div(left: int, right: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _trunc_mod(left: int, right: int) -> int:
    """Remainder taking the sign of the dividend."""
    return left - right * _trunc_div(left, right)


OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _trunc_div,
    "%": _trunc_mod,
    "^": operator.xor,
}


@dataclass
class ExprNode:
    """A node holding an operand digit or a binary operator."""

    symbol: str
    left: ExprNode | None = None
    right: ExprNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_expression_tree(postfix: str) -> ExprNode:
    """Build the tree for a postfix string of digits and operators."""
    stack: list[ExprNode] = []
    for symbol in postfix:
        if symbol in string.digits:
            stack.append(ExprNode(symbol))
        elif symbol in OPERATORS:
            if len(stack) < 2:
                raise ExpressionError(f"operator {symbol!r} lacks two operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(ExprNode(symbol, left, right))
        else:
            raise ExpressionError(f"unexpected character {symbol!r}")
    if len(stack) != 1:
        raise ExpressionError("expression does not reduce to a single tree")
    return stack[0]


def inorder(node: ExprNode | None) -> str:
    """Return the symbols of the tree in inorder, without parentheses."""
    if node is None:
        return ""
    return inorder(node.left) + node.symbol + inorder(node.right)


def evaluate(node: ExprNode | None) -> int:
    """Evaluate the tree with integer arithmetic; ``^`` is bitwise xor."""
    if node is None:
        return 0
    if node.is_leaf:
        if node.symbol not in string.digits:
            raise ExpressionError(f"leaf {node.symbol!r} is not a digit")
        return int(node.symbol)
    try:
        apply = OPERATORS[node.symbol]
    except KeyError:
        raise ExpressionError(f"unknown operator {node.symbol!r}") from None
    return apply(evaluate(node.left), evaluate(node.right))


def main(argv: list[str] | None = None) -> int:
    """Read a postfix expression, print it in infix and print its value."""
    parser = argparse.ArgumentParser(description="Evaluate a postfix expression.")
    parser.add_argument("expression", nargs="?")
    args = parser.parse_args(argv)
    text = args.expression
    if text is None:
        try:
            text = input("Enter postfix: ")
        except EOFError:
            text = ""
    text = text.strip()
    try:
        tree = build_expression_tree(text)
        value = evaluate(tree)
    except (ExpressionError, ZeroDivisionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(inorder(tree))
    print("After evaluating")
    print(value)
    return 0