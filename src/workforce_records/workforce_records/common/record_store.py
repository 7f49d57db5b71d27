from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Generic, Iterable, Mapping, Optional, Protocol, Sequence, TypeVar

from ..core.exceptions import NotFoundError, ValidationError
from .datetime_utils import now_local

T = TypeVar("T")

IMMUTABLE_FIELDS = frozenset({"id", "createdAt", "created_at"})


class RecordRepository(Protocol[T]):
    def load_all(self) -> Sequence[T]:
        raise NotImplementedError

    def save_all(self, records: Iterable[T]) -> None:
        raise NotImplementedError


class RecordStore(Generic[T]):
    """In-process mapping id -> record backed by a load-all/save-all repository.

    Subclasses name the id attribute and the updatable fields; every
    successful mutation is written through to the repository.
    """

    id_attr: str = "id"
    label: str = "Bản ghi"
    updatable_fields: Mapping[str, str] = {}

    def __init__(self, repository: RecordRepository[T], *, clock: Optional[Callable[[], datetime]] = None):
        self._repository = repository
        self._clock = clock or now_local
        self._records: dict[str, T] = {}
        for record in repository.load_all():
            self._records[getattr(record, self.id_attr)] = record

    def __len__(self) -> int:
        return len(self._records)

    def get(self, record_id: str) -> T:
        record = self._records.get(str(record_id))
        if record is None:
            raise NotFoundError(f"{self.label} không tồn tại: {record_id}")
        return record

    def all(self) -> list[T]:
        return list(self._records.values())

    def _put(self, record: T) -> T:
        key = getattr(record, self.id_attr)
        previous = dict(self._records)
        self._records[key] = record
        self._persist(previous)
        return record

    def _remove(self, record_id: str) -> bool:
        previous = dict(self._records)
        if self._records.pop(str(record_id), None) is None:
            return False
        self._persist(previous)
        return True

    def _persist(self, previous: dict[str, T]) -> None:
        try:
            self._repository.save_all(list(self._records.values()))
        except Exception:
            # Storage failed: keep memory in step with what is stored.
            self._records = previous
            raise

    def _merge(self, record: T, changes: Mapping[str, Any]) -> T:
        """Return `record` with `changes` applied; id and createdAt never move."""

        fields: dict[str, Any] = {}
        for key, value in changes.items():
            if key in IMMUTABLE_FIELDS or key == self.id_attr:
                raise ValidationError(f"Không được thay đổi trường {key}")
            attr = self.updatable_fields.get(key)
            if attr is None:
                raise ValidationError(f"Trường không hợp lệ: {key}")
            fields[attr] = value
        return replace(record, **fields)
