from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass
class DrainConfig:
    limit: Optional[int] = None  # None -> all remaining combinations
    progress: bool = False
    desc: str = "Combinations"
    verbose: bool = False

    def validate(self) -> None:
        if self.limit is not None and self.limit < 0:
            raise ValueError("limit must be >= 0 or None.")
        if not self.desc:
            raise ValueError("desc must not be empty.")
