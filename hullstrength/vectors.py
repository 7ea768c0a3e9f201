"""Element-wise operations and running sums over sequences of floats."""

from collections.abc import Iterable, Sequence
from itertools import accumulate, pairwise


def _check_lengths(left: Sequence[float], right: Sequence[float]) -> None:
    if len(left) != len(right):
        raise ValueError(
            f"sequences differ in length: {len(left)} != {len(right)}"
        )


def sum_above(values: Iterable[float]) -> list[float]:
    """Running sum from the top: res[0] = 0, res[i] = res[i-1] + src[i-1]."""
    return list(accumulate(values, initial=0.0))


def integral_sum(values: Sequence[float]) -> list[float]:
    """Integral sum: res[0] = 0, res[i] = res[i-1] + src[i-1] + src[i]."""
    return list(
        accumulate((a + b for a, b in pairwise(values)), initial=0.0)
    )


def shift(values: Iterable[float], rhs: float) -> list[float]:
    """Add ``rhs`` to every element."""
    return [v + rhs for v in values]


def div_single(values: Iterable[float], rhs: float) -> list[float]:
    """Divide every element by ``rhs``."""
    return [v / rhs for v in values]


def mul_single(values: Iterable[float], rhs: float) -> list[float]:
    """Multiply every element by ``rhs``."""
    return [v * rhs for v in values]


def add_vec(left: Sequence[float], right: Sequence[float]) -> list[float]:
    """Pairwise sum of two sequences of equal length."""
    _check_lengths(left, right)
    return [a + b for a, b in zip(left, right)]


def sub_vec(left: Sequence[float], right: Sequence[float]) -> list[float]:
    """Pairwise difference of two sequences of equal length."""
    _check_lengths(left, right)
    return [a - b for a, b in zip(left, right)]


def mul_vec(left: Sequence[float], right: Sequence[float]) -> list[float]:
    """Pairwise product of two sequences of equal length."""
    _check_lengths(left, right)
    return [a * b for a, b in zip(left, right)]


def div_vec(left: Sequence[float], right: Sequence[float]) -> list[float]:
    """Pairwise quotient of two sequences of equal length."""
    _check_lengths(left, right)
    return [a / b for a, b in zip(left, right)]