from __future__ import annotations
import math
from typing import Sequence, Tuple


def n_combinations(n: int, k: int) -> int:
    if n < 0:
        raise ValueError(f"{n=} (<0)")
    if k < 0:
        raise ValueError(f"{k=} (<0)")
    return math.comb(n, k)


def combination_at(n: int, k: int, rank: int) -> Tuple[int, ...]:
    """Index tuple at position ``rank`` of the lexicographic enumeration.

    Walks the positions left to right and, for each candidate value,
    skips the block of combinations that start with it while ``rank`` is
    past that block.
    """
    if k > n:
        raise ValueError(f"Combination length longer than sequence ({k} > {n})")
    total = n_combinations(n, k)
    if not 0 <= rank < total:
        raise IndexError(f"{rank=} out of valid range [0, {total})")

    values = []
    start = 0
    for pos in range(k):
        n_on_right = k - pos - 1
        for v in range(start, n - n_on_right):
            block = math.comb(n - v - 1, n_on_right)
            if rank < block:
                values.append(v)
                start = v + 1
                break
            rank -= block
    return tuple(values)


def combination_rank(n: int, indices: Sequence[int]) -> int:
    k = len(indices)
    prev = -1
    for v in indices:
        if v <= prev or v >= n:
            raise ValueError(f"indices must be strictly increasing within [0, {n}): {tuple(indices)}")
        prev = v

    rank = 0
    start = 0
    for pos, v in enumerate(indices):
        n_on_right = k - pos - 1
        for skipped in range(start, v):
            rank += math.comb(n - skipped - 1, n_on_right)
        start = v + 1
    return rank
