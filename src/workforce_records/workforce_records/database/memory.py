from __future__ import annotations

from typing import Generic, Iterable, Optional, Sequence, TypeVar

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """Keeps the last saved collection in memory. Used by default and in tests."""

    def __init__(self, initial: Optional[Iterable[T]] = None):
        self._records: list[T] = list(initial or [])
        self.save_count = 0

    def load_all(self) -> Sequence[T]:
        return list(self._records)

    def save_all(self, records: Iterable[T]) -> None:
        self._records = list(records)
        self.save_count += 1
