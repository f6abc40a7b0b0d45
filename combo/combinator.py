from __future__ import annotations
from enum import Enum
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

from combo.combination_view import CombinationView
from combo.counting import n_combinations

T = TypeVar("T")


class CombinatorState(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    EXHAUSTED = "exhausted"


class Combinator(Generic[T]):
    """Stateful enumerator over all ``k``-combinations of ``source``.

    Combinations come out in lexicographic order of their index tuples.
    Each call to :meth:`next` moves the index tuple forward in place and
    hands out a :class:`CombinationView`; ``None`` signals exhaustion,
    which is terminal.

    The source is only borrowed: it is never copied or modified, and the
    caller has to keep it unchanged for as long as views are being read.
    """

    def __init__(self, source: Sequence[T], k: int):
        if k < 0:
            raise ValueError("k must be >= 0")
        if k > len(source):
            raise ValueError(f"Combination length longer than sequence ({k} > {len(source)})")

        self._source = source
        self._k = k
        self._indices: List[int] = list(range(k))
        self._state = CombinatorState.NOT_STARTED
        self._produced = 0

    @property
    def source(self) -> Sequence[T]:
        return self._source

    @property
    def k(self) -> int:
        return self._k

    @property
    def state(self) -> CombinatorState:
        return self._state

    @property
    def indices(self) -> Tuple[int, ...]:
        return tuple(self._indices)

    @property
    def total(self) -> int:
        return n_combinations(len(self._source), self._k)

    @property
    def produced(self) -> int:
        return self._produced

    @property
    def remaining(self) -> int:
        if self._state is CombinatorState.EXHAUSTED:
            return 0
        return self.total - self._produced

    def _advance(self) -> bool:
        """Moves the index tuple one step forward; False once exhausted."""
        if self._state is CombinatorState.EXHAUSTED:
            return False

        if self._state is CombinatorState.NOT_STARTED:
            # the initial tuple [0, 1, ..., k-1] is the first combination
            self._state = CombinatorState.IN_PROGRESS
            self._produced += 1
            return True

        r = self._indices
        k = self._k
        m = len(self._source)

        for i in range(k - 1, -1, -1):
            if r[i] + 1 == m - k + 1 + i:
                continue  # position i is at its maximum, try the parent
            r[i] += 1
            for j in range(i + 1, k):
                r[j] = r[j - 1] + 1
            self._produced += 1
            return True

        self._state = CombinatorState.EXHAUSTED
        return False

    def next(self) -> Optional[CombinationView[T]]:
        if not self._advance():
            return None
        return CombinationView(self._source, tuple(self._indices))

    def skip(self, count: int) -> int:
        if count < 0:
            raise ValueError("count must be >= 0")
        skipped = 0
        while skipped < count and self._advance():
            skipped += 1
        return skipped

    def __iter__(self) -> Combinator[T]:
        return self

    def __next__(self) -> CombinationView[T]:
        view = self.next()
        if view is None:
            raise StopIteration
        return view

    def __repr__(self) -> str:
        return (f"Combinator(n={len(self._source)}, k={self._k}, "
                f"state={self._state.value}, indices={tuple(self._indices)})")


def combinations(source: Sequence[T], k: int) -> Combinator[T]:
    """Returns an enumerator over all combinations of length ``k`` from ``source``.

    Each produced combination is itself an iterator over references to its
    elements::

        combinator = combinations(list(range(5)), 3)
        while (combo := combinator.next()) is not None:
            print(list(combo))
        # [0, 1, 2], [0, 1, 3], [0, 1, 4], [0, 2, 3], ... [2, 3, 4]

    Raises ``ValueError`` when ``k`` is longer than the sequence.
    """
    return Combinator(source, k)
