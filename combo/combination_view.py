from __future__ import annotations
from typing import Generic, Sequence, Tuple, TypeVar

import numpy as np

T = TypeVar("T")


class CombinationView(Generic[T]):
    """Forward-only cursor over the elements of a single combination.

    Holds its own copy of the index tuple, so it stays valid after the
    producing ``Combinator`` has advanced.
    """

    __slots__ = ("_source", "_indices", "_pos")

    def __init__(self, source: Sequence[T], indices: Tuple[int, ...]):
        self._source = source
        self._indices = indices
        self._pos = 0

    @property
    def indices(self) -> Tuple[int, ...]:
        return self._indices

    @property
    def remaining(self) -> int:
        return len(self._indices) - self._pos

    def __len__(self) -> int:
        return len(self._indices)

    def __length_hint__(self) -> int:
        return self.remaining

    def __iter__(self) -> CombinationView[T]:
        return self

    def __next__(self) -> T:
        if self._pos >= len(self._indices):
            raise StopIteration
        item = self._source[self._indices[self._pos]]
        self._pos += 1
        return item

    def to_tuple(self) -> Tuple[T, ...]:
        # drains whatever has not been pulled yet
        return tuple(self)

    def as_array(self) -> np.ndarray:
        return np.asarray(self._indices, dtype=np.int64).reshape(len(self._indices))

    def __repr__(self) -> str:
        return f"CombinationView(indices={self._indices}, pos={self._pos})"
