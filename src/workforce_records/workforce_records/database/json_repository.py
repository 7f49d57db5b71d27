from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Callable, Generic, Iterable, Sequence, TypeVar

T = TypeVar("T")


class JsonFileRepository(Generic[T]):
    """One JSON document per store: {"records": [ {...}, ... ]}.

    Saves go to a temporary file in the same directory and are moved into
    place, so a crash never leaves a half-written document.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        decode: Callable[[dict[str, Any]], T],
        encode: Callable[[T], dict[str, Any]],
    ):
        self._path = Path(path)
        self._decode = decode
        self._encode = encode

    def load_all(self) -> Sequence[T]:
        if not self._path.exists():
            return []
        data = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        # Bare arrays are accepted as well as the {"records": [...]} envelope.
        rows = data if isinstance(data, list) else data.get("records", [])
        return [self._decode(row) for row in rows]

    def save_all(self, records: Iterable[T]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"records": [self._encode(r) for r in records]}

        fd, tmp_name = tempfile.mkstemp(prefix=self._path.name, suffix=".tmp", dir=self._path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(payload, fh, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self._path)
        except Exception:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
