from __future__ import annotations

from collections.abc import Iterable
from typing import Optional


class SequentialIdGenerator:
    def __init__(self, ids: Optional[Iterable[str]] = None) -> None:
        self._ids = iter(ids) if ids is not None else None
        self._n = 0

    def new_id(self) -> str:
        if self._ids is not None:
            return next(self._ids)
        self._n += 1
        return f"file{self._n:04d}"
