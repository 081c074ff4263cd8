"""Bracket matching, infix conversion and evaluation of arithmetic expressions."""

from __future__ import annotations

from dsakit.stacks import LinkedStack, StackUnderflow

_OPERATORS = frozenset("/*-+^")
_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}
_CLOSERS = {")": "(", "]": "[", "}": "{"}


def is_balanced(text: str) -> bool:
    """True when every bracket in the text is closed by its partner in order."""
    stack: LinkedStack[str] = LinkedStack()
    for ch in text:
        if ch in "([{":
            stack.push(ch)
        elif ch in _CLOSERS:
            if stack.is_empty() or stack.top() != _CLOSERS[ch]:
                return False
            stack.pop()
    return stack.is_empty()


def is_operator(ch: str) -> bool:
    """True for one of the binary operators ``+ - * / ^``."""
    return ch in _OPERATORS


def precedence(op: str) -> int:
    """Binding strength of an operator; 0 for anything else."""
    return _PRECEDENCE.get(op, 0)


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _convert(chars: str, opening: str, closing: str, pop_equal: bool) -> str:
    stack: LinkedStack[str] = LinkedStack()
    output: list[str] = []
    for ch in chars:
        if _is_operand(ch):
            output.append(ch)
        elif ch == opening:
            stack.push(ch)
        elif ch == closing:
            while not stack.is_empty() and stack.top() != opening:
                output.append(stack.pop())
            if not stack.is_empty():
                stack.pop()
        elif is_operator(ch):
            rank = precedence(ch)
            while not stack.is_empty() and (
                precedence(stack.top()) >= rank
                if pop_equal
                else precedence(stack.top()) > rank
            ):
                output.append(stack.pop())
            stack.push(ch)
    output.extend(stack)
    return "".join(output)


def infix_to_postfix(expression: str) -> str:
    """Postfix form of an infix expression; operators of equal rank group left."""
    return _convert(expression, "(", ")", pop_equal=True)


def infix_to_prefix(expression: str) -> str:
    """Prefix form of an infix expression."""
    return _convert(expression[::-1], ")", "(", pop_equal=False)[::-1]


def apply_operator(op: str, left: int, right: int) -> int:
    """Apply a binary operator; division truncates towards zero."""
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if op == "/":
        if right == 0:
            raise ZeroDivisionError("integer division by zero")
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient
    if op == "^":
        if right < 0:
            raise ValueError("negative exponents are not supported")
        return left**right
    raise ValueError(f"unknown operator {op!r}")


def evaluate(expression: str) -> int:
    """Value of an infix expression whose operands are single digits."""
    stack: LinkedStack[int] = LinkedStack()
    for ch in infix_to_postfix(expression):
        if is_operator(ch):
            try:
                right = stack.pop()
                left = stack.pop()
            except StackUnderflow:
                raise ValueError(f"malformed expression {expression!r}") from None
            stack.push(apply_operator(ch, left, right))
        elif ch.isascii() and ch.isdigit():
            stack.push(int(ch))
        else:
            raise ValueError(f"operand {ch!r} is not a single digit")
    if len(stack) != 1:
        raise ValueError(f"malformed expression {expression!r}")
    return stack.pop()