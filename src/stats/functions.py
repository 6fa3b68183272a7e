"""Descriptive statistics over a sequence of floats (stdlib only, no numpy needed).

Every function takes a read-only sequence and returns ``float | None``.
``None`` means the statistic is undefined for that input; nothing here
raises for an empty sample. Inputs are assumed to be finite floats: NaN
and infinities are outside the contract and give unspecified results.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

from src.common.constants import EMPTY_L2, EMPTY_MEAN

# Type of statistics function. If the statistic is ill-defined for the
# input, the function returns None.
StatFn = Callable[[Sequence[float]], float | None]


def _plain_sum(values) -> float:
    # Left-to-right accumulation; builtin sum() compensates on 3.12+.
    total = 0.0
    for x in values:
        total += x
    return total


def mean(nums: Sequence[float]) -> float | None:
    """Arithmetic mean of *nums*.

    The mean of an empty sample is defined here as 0.0. That is a
    convention of this library, not a mathematical fact.
    """
    n = len(nums)
    if n == 0:
        return EMPTY_MEAN
    return _plain_sum(nums) / n


def stddev(nums: Sequence[float]) -> float | None:
    """Population standard deviation of *nums* (divisor n, not n - 1).

    Undefined (``None``) for an empty sample. A constant sample gives
    exactly 0.0, even when its rounded mean is off from the repeated value.
    """
    n = len(nums)
    if n == 0:
        return None
    first = nums[0]
    if all(x == first for x in nums):
        return 0.0
    m = mean(nums)
    return math.sqrt(_plain_sum((x - m) ** 2 for x in nums) / n)


def median(nums: Sequence[float]) -> float | None:
    """Lower-biased median of *nums*.

    Returns the element at zero-based index ``n // 2 - 1`` of an ascending
    sorted copy: the lower middle element for even n, and the element just
    before the middle for odd n. A single-element sample yields that
    element. Undefined (``None``) for an empty sample.

    >>> median([0.0, 0.5, -1.0, 1.0])
    0.0
    """
    if len(nums) == 0:
        return None
    s = sorted(nums)
    return float(s[max(len(s) // 2 - 1, 0)])


def l2(nums: Sequence[float]) -> float | None:
    """Euclidean (L2) norm of *nums*. The norm of an empty sample is 0.0."""
    if len(nums) == 0:
        return EMPTY_L2
    return math.sqrt(_plain_sum(x * x for x in nums))


STAT_FNS: dict[str, StatFn] = {
    "mean": mean,
    "stddev": stddev,
    "median": median,
    "l2": l2,
}
