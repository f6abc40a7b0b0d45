from __future__ import annotations
from typing import Iterator, Optional, Tuple, TypeVar

import numpy as np
from tqdm.auto import tqdm

from combo.combinator import Combinator
from combo.counting import n_combinations
from combo.drain_conf import DrainConfig

T = TypeVar("T")


def _pbar(iterable, cfg: DrainConfig, **kwargs):
    return tqdm(iterable, **kwargs) if cfg.progress else iterable


def _budget(combinator: Combinator, cfg: DrainConfig) -> int:
    remaining = combinator.remaining
    return remaining if cfg.limit is None else min(remaining, cfg.limit)


def _take(combinator: Combinator[T], budget: int) -> Iterator[Tuple[T, ...]]:
    for _ in range(budget):
        view = combinator.next()
        if view is None:
            return
        yield view.to_tuple()


def drain(combinator: Combinator[T], cfg: Optional[DrainConfig] = None) -> Iterator[Tuple[T, ...]]:
    """Lazily yields the remaining combinations as tuples of source elements.

    The config is validated on the call itself, before the first pull.
    """
    cfg = cfg if cfg is not None else DrainConfig()
    cfg.validate()
    return _drain(combinator, cfg)


def _drain(combinator: Combinator[T], cfg: DrainConfig) -> Iterator[Tuple[T, ...]]:
    budget = _budget(combinator, cfg)
    if cfg.verbose:
        print(f"[Drain] n={len(combinator.source)} k={combinator.k} "
              f"remaining={combinator.remaining} budget={budget}")

    count = 0
    for combo in _pbar(_take(combinator, budget), cfg, total=budget, desc=cfg.desc, unit="combo"):
        count += 1
        yield combo

    if cfg.verbose:
        print(f"[Drain] done: yielded={count} state={combinator.state.value}")


def index_matrix(n: int, k: int, cfg: Optional[DrainConfig] = None) -> np.ndarray:
    """Stacks the index tuples of all ``k``-combinations of ``range(n)``.

    Returns an ``int64`` array of shape ``(rows, k)`` where ``rows`` is
    ``C(n, k)``, capped by ``cfg.limit``.
    """
    cfg = cfg if cfg is not None else DrainConfig()
    cfg.validate()

    combinator = Combinator(range(n), k)
    rows = n_combinations(n, k) if cfg.limit is None else min(n_combinations(n, k), cfg.limit)
    out = np.empty((rows, k), dtype=np.int64)
    for row, combo in enumerate(drain(combinator, cfg)):
        out[row, :] = combo
    return out
