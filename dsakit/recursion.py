"""Classic recursive algorithms: sums, powers, series, combinations and Hanoi."""

from __future__ import annotations

import argparse
from collections.abc import Iterator


def accumulated_sum(n: int) -> int:
    """Count ``n`` calls on the way down and add the final count once per call."""
    counter = 0

    def step(k: int) -> int:
        nonlocal counter
        if k > 0:
            counter += 1
            return step(k - 1) + counter
        return 0

    return step(n)


def head_recursion(n: int) -> list[int]:
    """Values produced after the recursive call: ``1 .. n``."""
    if n <= 0:
        return []
    return [*head_recursion(n - 1), n]


def tail_recursion(n: int) -> list[int]:
    """Values produced before the recursive call: ``n .. 1``."""
    if n <= 0:
        return []
    return [n, *tail_recursion(n - 1)]


def tree_recursion(n: int) -> list[int]:
    """Values produced by a function that calls itself twice per level."""
    if n <= 0:
        return []
    branch = tree_recursion(n - 1)
    return [n, *branch, *branch]


def indirect_recursion(n: int) -> list[int]:
    """Values produced by two functions that call each other."""
    produced: list[int] = []

    def fun_a(k: int) -> None:
        if k > 0:
            produced.append(k)
            fun_b(k - 1)

    def fun_b(k: int) -> None:
        if k > 1:
            produced.append(k)
            fun_a(k // 2)

    fun_a(n)
    return produced


def nested_recursion(n: int) -> int:
    """A function whose argument is itself a recursive call (McCarthy's 91)."""
    if n > 100:
        return n - 10
    return nested_recursion(nested_recursion(n + 11))


def sum_natural(n: int) -> int:
    """Sum of the first ``n`` natural numbers."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 0
    return sum_natural(n - 1) + n


def factorial(n: int) -> int:
    """``n!`` computed recursively."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n <= 1:
        return 1
    return factorial(n - 1) * n


def power(base: int, exponent: int) -> int:
    """``base ** exponent`` by one multiplication per call."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if exponent == 0:
        return 1
    return power(base, exponent - 1) * base


def fast_power(base: int, exponent: int) -> int:
    """``base ** exponent`` by repeated squaring; non-positive exponents give 1."""
    if exponent <= 0:
        return 1
    if exponent % 2 == 0:
        return fast_power(base * base, exponent // 2)
    return fast_power(base * base, (exponent - 1) // 2) * base


def taylor_exp(x: float, terms: int) -> float:
    """Approximate ``e**x`` with ``terms`` Taylor terms after the constant, recursively."""
    if terms < 0:
        raise ValueError("terms must be non-negative")

    def expand(n: int) -> tuple[float, float, float]:
        if n == 0:
            return 1.0, 1.0, 1.0
        result, numerator, denominator = expand(n - 1)
        numerator *= x
        denominator *= n
        return result + numerator / denominator, numerator, denominator

    return expand(terms)[0]


def taylor_exp_iter(x: float, terms: int) -> float:
    """Approximate ``e**x`` with ``terms`` Taylor terms after the constant, iteratively."""
    numerator = 1.0
    denominator = 1.0
    result = 1.0
    for i in range(1, terms + 1):
        numerator *= x
        denominator *= i
        result += numerator / denominator
    return result


def taylor_exp_horner(x: float, terms: int) -> float:
    """Approximate ``e**x`` using Horner's rule, starting from an accumulator of zero."""
    result = 0.0
    for n in range(terms, 0, -1):
        result = 1 + x * result / n
    return result


def fibonacci_series(count: int) -> list[int]:
    """Fibonacci numbers ``F(0) .. F(count)``."""
    if count < 0:
        raise ValueError("count must be non-negative")

    def extend(first: int, second: int, remaining: int) -> list[int]:
        if remaining <= 1:
            return []
        total = first + second
        return [total, *extend(second, total, remaining - 1)]

    if count == 0:
        return [0]
    return [0, 1, *extend(0, 1, count)]


def fibonacci(n: int) -> int:
    """``F(n)`` by plain double recursion; values of ``n`` up to 1 return ``n``."""
    if n <= 1:
        return n
    return fibonacci(n - 2) + fibonacci(n - 1)


def fibonacci_iter(n: int) -> int:
    """``F(n)`` computed iteratively."""
    if n <= 1:
        return n
    first, second = 0, 1
    for _ in range(2, n + 1):
        first, second = second, first + second
    return second


def fibonacci_memo(n: int) -> int:
    """``F(n)`` by recursion with memoisation."""
    memo: dict[int, int] = {}

    def fib(k: int) -> int:
        if k <= 1:
            return k
        if k not in memo:
            memo[k] = fib(k - 2) + fib(k - 1)
        return memo[k]

    return fib(n)


def _check_ncr(n: int, r: int) -> None:
    if not 0 <= r <= n:
        raise ValueError("r must satisfy 0 <= r <= n")


def ncr(n: int, r: int) -> int:
    """Binomial coefficient by Pascal's rule."""
    _check_ncr(n, r)
    if n == r or r == 0:
        return 1
    return ncr(n - 1, r - 1) + ncr(n - 1, r)


def ncr_factorial(n: int, r: int) -> int:
    """Binomial coefficient as ``n! / (r! (n-r)!)``."""
    _check_ncr(n, r)
    return factorial(n) // (factorial(r) * factorial(n - r))


def hanoi_moves(
    disks: int, source: int = 1, via: int = 2, target: int = 3
) -> Iterator[tuple[int, int]]:
    """Yield ``(from_tower, to_tower)`` moves that carry all disks to ``target``."""
    if disks > 0:
        yield from hanoi_moves(disks - 1, source, target, via)
        yield source, target
        yield from hanoi_moves(disks - 1, via, source, target)


def main(argv: list[str] | None = None) -> int:
    """Print the Tower of Hanoi moves for a number of disks."""
    parser = argparse.ArgumentParser(
        prog="hanoi", description="Print the moves that solve the Tower of Hanoi."
    )
    parser.add_argument("disks", nargs="?", type=int, help="number of disks")
    args = parser.parse_args(argv)
    disks = args.disks
    if disks is None:
        disks = int(input("Enter Number of Disks to Move from Tower A to C : "))
    print("Follow these steps to move all Disks from Tower A to C")
    for start, end in hanoi_moves(disks):
        print(f"Tower [{start}] to Tower [{end}]")
    return 0