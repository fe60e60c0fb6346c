# pot_attractions/export.py
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Union

import pandas as pd

from pot_attractions.errors import MissingField
from pot_attractions.record import CSV_COLUMNS, AttractionRecord

RecordLike = Union[AttractionRecord, Mapping[str, Any]]


def to_row(record: RecordLike) -> List[Any]:
    """Values in CSV_COLUMNS order; strict lookup, nothing defaulted."""
    data: Mapping[str, Any] = record.to_dict() if isinstance(record, AttractionRecord) else record
    row = []
    for col in CSV_COLUMNS:
        if col not in data:
            raise MissingField(col, where=f"record {data.get('id', '?')}")
        row.append(data[col])
    return row


class CsvExporter:
    """Full (never incremental) CSV export of the cache."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def export(self, records: Iterable[RecordLike]) -> int:
        """
        Overwrite the CSV with one row per record, in the given order.

        Returns:
            Number of data rows written.
        """
        rows = [to_row(r) for r in records]
        # object dtype keeps the raw strings exactly as cached
        df = pd.DataFrame(rows, columns=CSV_COLUMNS, dtype=object)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(self.path, index=False, encoding="utf-8", lineterminator="\n")
        return len(rows)


def summarize(records: Iterable[RecordLike]) -> Dict[str, int]:
    """Counts used by the CLI after an export-only run."""
    rows = [to_row(r) for r in records]
    with_coords = sum(1 for row in rows if row[CSV_COLUMNS.index("lat_lng")])
    return {"records": len(rows), "with_lat_lng": with_coords}
