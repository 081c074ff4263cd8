import math

import pytest

from dsakit.recursion import (
    accumulated_sum,
    factorial,
    fast_power,
    fibonacci,
    fibonacci_iter,
    fibonacci_memo,
    fibonacci_series,
    hanoi_moves,
    head_recursion,
    indirect_recursion,
    main,
    ncr,
    ncr_factorial,
    nested_recursion,
    power,
    sum_natural,
    tail_recursion,
    taylor_exp,
    taylor_exp_horner,
    taylor_exp_iter,
    tree_recursion,
    tree_recursion as _tree,
)


@pytest.mark.parametrize("n", [0, 1, 5, 12])
def test_accumulated_sum_is_square(n):
    assert accumulated_sum(n) == n * n


def test_head_and_tail_recursion_orders():
    assert head_recursion(5) == list(range(1, 6))
    assert tail_recursion(5) == list(reversed(head_recursion(5)))
    assert head_recursion(0) == []


@pytest.mark.parametrize("n", [1, 3, 5])
def test_tree_recursion_shape(n):
    values = tree_recursion(n)
    assert len(values) == 2**n - 1
    assert values[0] == n
    for k in range(1, n + 1):
        assert values.count(k) == 2 ** (n - k)


def test_tree_recursion_is_self_similar():
    sub = _tree(2)
    assert tree_recursion(3) == [3, *sub, *sub]


def test_indirect_recursion():
    assert indirect_recursion(5) == [5, 4, 2]
    assert indirect_recursion(0) == []


def test_nested_recursion():
    assert nested_recursion(95) == 91
    assert all(nested_recursion(n) == nested_recursion(95) for n in range(0, 101))
    assert nested_recursion(150) == 140


@pytest.mark.parametrize("n", [0, 1, 10, 50])
def test_sum_natural(n):
    assert sum_natural(n) == sum(range(n + 1))


def test_sum_natural_negative():
    with pytest.raises(ValueError):
        sum_natural(-1)


@pytest.mark.parametrize("n", [0, 1, 5, 10])
def test_factorial(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-3)


@pytest.mark.parametrize("base,exponent", [(2, 5), (3, 0), (7, 8), (-2, 3), (5, 1)])
def test_powers(base, exponent):
    assert power(base, exponent) == base**exponent
    assert fast_power(base, exponent) == base**exponent


def test_power_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)
    assert fast_power(2, -1) == 1


def test_taylor_series_approximates_e():
    assert taylor_exp(1, 10) == pytest.approx(math.e, abs=1e-6)
    assert taylor_exp_iter(1, 10) == pytest.approx(taylor_exp(1, 10))
    assert taylor_exp_horner(1, 10) == pytest.approx(math.e, abs=1e-6)


@pytest.mark.parametrize("x", [0, 1, 2, 3])
def test_taylor_variants_agree(x):
    expected = math.exp(x)
    assert taylor_exp(x, 30) == pytest.approx(expected)
    assert taylor_exp_iter(x, 30) == pytest.approx(expected)
    assert taylor_exp_horner(x, 30) == pytest.approx(expected)


def test_taylor_zero_terms():
    assert taylor_exp(5, 0) == 1.0
    assert taylor_exp_iter(5, 0) == 1.0
    with pytest.raises(ValueError):
        taylor_exp(1, -1)


def test_fibonacci_series():
    series = fibonacci_series(10)
    assert len(series) == 11
    assert series[:2] == [0, 1]
    assert series[-1] == fibonacci(10)
    for a, b, c in zip(series, series[1:], series[2:]):
        assert a + b == c


def test_fibonacci_series_negative():
    with pytest.raises(ValueError):
        fibonacci_series(-1)


def test_fibonacci_value():
    assert fibonacci(10) == 55


@pytest.mark.parametrize("n", range(0, 20))
def test_fibonacci_variants_agree(n):
    assert fibonacci_iter(n) == fibonacci(n)
    assert fibonacci_memo(n) == fibonacci(n)


def test_fibonacci_memo_large():
    assert fibonacci_memo(80) == fibonacci_iter(80)


@pytest.mark.parametrize("n,r", [(6, 2), (5, 0), (5, 5), (10, 3), (12, 6)])
def test_ncr(n, r):
    assert ncr(n, r) == math.comb(n, r)
    assert ncr_factorial(n, r) == ncr(n, r)


@pytest.mark.parametrize("n,r", [(3, 4), (3, -1)])
def test_ncr_invalid(n, r):
    with pytest.raises(ValueError):
        ncr(n, r)
    with pytest.raises(ValueError):
        ncr_factorial(n, r)


@pytest.mark.parametrize("n", [1, 2, 3, 4, 6])
def test_hanoi_moves_are_legal(n):
    pegs = {1: list(range(n, 0, -1)), 2: [], 3: []}
    moves = list(hanoi_moves(n, 1, 2, 3))
    assert len(moves) == 2**n - 1
    for start, end in moves:
        disk = pegs[start].pop()
        assert not pegs[end] or pegs[end][-1] > disk
        pegs[end].append(disk)
    assert pegs[3] == list(range(n, 0, -1))
    assert pegs[1] == [] and pegs[2] == []


def test_hanoi_single_disk():
    assert list(hanoi_moves(1)) == [(1, 3)]
    assert list(hanoi_moves(0)) == []


def test_main_prints_moves(capsys):
    assert main(["2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Follow these steps to move all Disks from Tower A to C"
    assert len(lines) == 1 + 3
    assert "Tower [1] to Tower [3]" in lines