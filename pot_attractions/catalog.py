# pot_attractions/catalog.py
from __future__ import annotations
from typing import Any, Dict, List

from pot_attractions.config import BASE_URL, CATEGORY_CODES
from pot_attractions.errors import MalformedResponse, MissingField
from pot_attractions.record import AttractionRecord

# remote attribute code -> record field
ATTRIBUTE_FIELDS: Dict[str, str] = {
    "id": "id",
    "A001": "name",
    "A003": "description_short",
    "A004": "description",
    "A018": "lat_lng",
    "created_at": "created_at",
    "updated_at": "updated_at",
}


# ---------- URL builders ----------

def objects_ids_url(category_code: str, base: str = BASE_URL) -> str:
    return f"{base}?categories={category_code}"


def object_url(object_id: str, base: str = BASE_URL) -> str:
    return f"{base}/{object_id}"


def category_code(category: str) -> str:
    try:
        return CATEGORY_CODES[category]
    except KeyError:
        known = ", ".join(sorted(CATEGORY_CODES))
        raise ValueError(f"Unknown category '{category}' (known: {known})") from None


# ---------- Projections ----------

def project_ids(payload: Any) -> List[str]:
    """[{id: ...}, ...] -> ids, server order kept."""
    if not isinstance(payload, list):
        raise MalformedResponse(
            f"expected a JSON array of objects, got {type(payload).__name__}"
        )
    ids = []
    for i, item in enumerate(payload):
        if not isinstance(item, dict) or "id" not in item:
            raise MissingField("id", where=f"object list entry #{i}")
        ids.append(item["id"])
    return ids


def project_attraction(payload: Any) -> AttractionRecord:
    """{attributes: {id, A001, ...}} -> AttractionRecord"""
    if not isinstance(payload, dict) or "attributes" not in payload:
        raise MissingField("attributes", where="object response")
    attributes = payload["attributes"]
    if not isinstance(attributes, dict):
        raise MalformedResponse("'attributes' is not an object")

    values = {}
    for code, field in ATTRIBUTE_FIELDS.items():
        if code not in attributes:
            raise MissingField(code, where=f"attributes of {attributes.get('id', '?')}")
        values[field] = attributes[code]
    return AttractionRecord(**values)


class Catalog:
    """
    Read side of the remote catalog.

    Usage:
        with Fetcher() as fetcher:
            catalog = Catalog(fetcher)
            ids = catalog.list_ids()
            first = catalog.fetch_detail(ids[0])
    """

    def __init__(self, fetcher, objects_url: str = BASE_URL):
        self.fetcher = fetcher
        self.objects_url = objects_url.rstrip("/")

    def list_ids(self, category: str = "attractions") -> List[str]:
        url = objects_ids_url(category_code(category), base=self.objects_url)
        ids = project_ids(self.fetcher.get_json(url))
        print(f"📋 {category}: {len(ids)} ids received")
        return ids

    def fetch_detail(self, object_id: str) -> AttractionRecord:
        url = object_url(object_id, base=self.objects_url)
        return project_attraction(self.fetcher.get_json(url))
