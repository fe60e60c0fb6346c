# pot_attractions/record.py
from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Mapping, Optional

from pot_attractions.errors import MissingField


@dataclass(frozen=True)
class AttractionRecord:
    """
    One tourism attraction as stored in the cache.

    Values are kept exactly as the API returned them: `lat_lng` stays the raw
    "lat,lng" string and the timestamps are opaque. Optional attributes may
    come back as null and are kept as None.
    """
    id: str
    name: Optional[str]
    description_short: Optional[str]
    description: Optional[str]
    lat_lng: Optional[str]
    created_at: Optional[str]
    updated_at: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict (cache / CSV order)"""
        return {name: getattr(self, name) for name in CSV_COLUMNS}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttractionRecord":
        """Strict inverse of to_dict(): every column must be present."""
        values = {}
        for name in CSV_COLUMNS:
            if name not in data:
                raise MissingField(name, where=f"record {data.get('id', '?')}")
            values[name] = data[name]
        return cls(**values)


CSV_COLUMNS: List[str] = [f.name for f in fields(AttractionRecord)]
