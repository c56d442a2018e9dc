"""Reverse colexicographic enumeration of k-combinations.

A k-combination of {0..n-1} is a strictly increasing tuple
(c_0 < c_1 < ... < c_{k-1}).  Colex order compares the tuples from the last
slot backwards; this module emits them from the colex-largest
(n-k, ..., n-1) down to the colex-smallest (0, ..., k-1).

The walk is an odometer over a single mutable index list.  Slot i has
"home" value i, the smallest value it can hold.  A cursor k_pos marks the
slot being driven home:

  1. slot k_pos descends one step at a time to home, emitting each step;
  2. k_pos moves up past slots already at home;
  3. that slot is decremented and, if still above home, every lower slot i
     is packed right beneath it (indices[k_pos] - (k_pos - i)) and k_pos
     returns to 0;
  4. the result is emitted.

The walk ends once the top slot reaches home.
"""
from __future__ import annotations

import math
from typing import Iterator, List, Tuple

from graphworks.errors import InvalidCombinationParameters

Combination = Tuple[int, ...]


def combination_count(n: int, k: int) -> int:
    """C(n, k), the number of combinations reverse_colex_combinations(n, k) emits."""
    _check_parameters(n, k)
    return math.comb(n, k)


def _check_parameters(n: object, k: object) -> None:
    if isinstance(n, bool) or isinstance(k, bool):
        raise InvalidCombinationParameters(n, k)
    if not isinstance(n, int) or not isinstance(k, int):
        raise InvalidCombinationParameters(n, k)
    if k < 0 or k > n:
        raise InvalidCombinationParameters(n, k)


def _choose_all(k: int) -> Iterator[Combination]:
    yield tuple(range(k))


def _choose_one(n: int) -> Iterator[Combination]:
    for value in range(n - 1, -1, -1):
        yield (value,)


def _cascade(n: int, k: int) -> Iterator[Combination]:
    # 2 <= k < n
    indices: List[int] = list(range(n - k, n))
    yield tuple(indices)

    k_pos = 0
    while True:
        while indices[k_pos] > k_pos:
            indices[k_pos] -= 1
            yield tuple(indices)

        k_pos += 1
        while k_pos < k and indices[k_pos] == k_pos:
            k_pos += 1
        if k_pos == k:
            return

        indices[k_pos] -= 1
        if indices[k_pos] != k_pos:
            top = indices[k_pos]
            for i in range(k_pos):
                indices[i] = top - (k_pos - i)
            k_pos = 0

        yield tuple(indices)

        if k_pos == k - 1 and indices[k_pos] == k_pos:
            return


def reverse_colex_combinations(n: int, k: int) -> Iterator[Combination]:
    """
    Lazily yield every k-combination of range(n) in reverse colex order.

    The first tuple is (n-k, ..., n-1) and the last is (0, ..., k-1); each
    tuple is a snapshot, so callers may keep them.

    Parameters are checked before the iterator is created: anything but
    integers with 0 <= k <= n raises InvalidCombinationParameters.

    k == n (including k == 0) yields the single combination (0, ..., k-1);
    k == 1 counts down from n-1 to 0; everything else runs the odometer.
    """
    _check_parameters(n, k)
    if k == n or k == 0:
        return _choose_all(k)
    if k == 1:
        return _choose_one(n)
    return _cascade(n, k)
