"""Shared fixtures: canned API payloads and an in-process fake catalog."""
from typing import Dict, List, Optional

import pandas as pd
import pytest

from pot_attractions.record import AttractionRecord


def read_csv(path) -> pd.DataFrame:
    """Read an export back; keep_default_na=False so "NA" stays a string."""
    return pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[])


def make_record(object_id: str, **overrides) -> AttractionRecord:
    values = {
        "id": object_id,
        "name": f"Attraction {object_id}",
        "description_short": f"Short {object_id}",
        "description": f"Long description of {object_id}",
        "lat_lng": "52.2297,21.0122",
        "created_at": "2020-01-01T10:00:00.000+01:00",
        "updated_at": "2021-06-01T10:00:00.000+02:00",
    }
    values.update(overrides)
    return AttractionRecord(**values)


def detail_payload(object_id: str) -> Dict:
    """Shape of GET /objects/{id}"""
    return {
        "attributes": {
            "id": object_id,
            "A001": f"Attraction {object_id}",
            "A003": f"Short {object_id}",
            "A004": f"Long description of {object_id}",
            "A018": "52.2297,21.0122",
            "A099": "ignored",
            "created_at": "2020-01-01T10:00:00.000+01:00",
            "updated_at": "2021-06-01T10:00:00.000+02:00",
        }
    }


class FakeCatalog:
    """Catalog double recording every detail fetch."""

    def __init__(
        self,
        ids: List[str],
        fail_on: Optional[Dict[str, Exception]] = None,
        detail_ids: Optional[Dict[str, str]] = None,
    ):
        self.ids = list(ids)
        self.fail_on = fail_on or {}
        self.detail_ids = detail_ids or {}
        self.fetched: List[str] = []
        self.listed: List[str] = []

    def list_ids(self, category: str = "attractions") -> List[str]:
        self.listed.append(category)
        return list(self.ids)

    def fetch_detail(self, object_id: str) -> AttractionRecord:
        if object_id in self.fail_on:
            raise self.fail_on[object_id]
        self.fetched.append(object_id)
        return make_record(self.detail_ids.get(object_id, object_id))


class FakeFetcher:
    """Fetcher double: url -> payload."""

    def __init__(self, responses: Dict[str, object]):
        self.responses = responses
        self.urls: List[str] = []

    def get_json(self, url: str):
        self.urls.append(url)
        return self.responses[url]


@pytest.fixture
def record_factory():
    return make_record
