# pot_attractions/store.py
"""
Local cache of fetched attractions.

The JSON file is both the output of a run and the resume state of the next
one, so it is always rewritten whole and atomically.
"""
from __future__ import annotations
import json
from pathlib import Path
from typing import Iterable, List, Protocol

from pot_attractions.errors import CacheCorrupt, MissingField
from pot_attractions.record import AttractionRecord


class RecordStore(Protocol):
    def load(self) -> List[AttractionRecord]: ...

    def save(self, records: Iterable[AttractionRecord]) -> None: ...


def atomic_write(path: Path, text: str):
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(text, encoding="utf-8")
    tmp.replace(path)


class JsonStore:
    """Ordered list of records in one pretty-printed JSON file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def __repr__(self):
        return f"JsonStore({str(self.path)!r})"

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> List[AttractionRecord]:
        if not self.exists():
            return []

        text = self.path.read_text(encoding="utf-8")
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise CacheCorrupt(f"{self.path} is not valid JSON: {e}") from e
        if not isinstance(raw, list):
            raise CacheCorrupt(
                f"{self.path} should hold a JSON array, found {type(raw).__name__}"
            )

        try:
            return [AttractionRecord.from_dict(row) for row in raw]
        except (MissingField, TypeError, AttributeError) as e:
            raise CacheCorrupt(f"{self.path}: {e}") from e

    def save(self, records: Iterable[AttractionRecord]):
        payload = [r.to_dict() for r in records]
        atomic_write(self.path, json.dumps(payload, ensure_ascii=False, indent=2))


class MemoryStore:
    """Store kept in a list; same contract as JsonStore."""

    def __init__(self, records: Iterable[AttractionRecord] = ()):
        self.records: List[AttractionRecord] = list(records)
        self.saves = 0

    def load(self) -> List[AttractionRecord]:
        return list(self.records)

    def save(self, records: Iterable[AttractionRecord]):
        self.records = list(records)
        self.saves += 1
