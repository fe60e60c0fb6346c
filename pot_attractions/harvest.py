# pot_attractions/harvest.py
"""
Slice-by-slice harvest with a checkpoint after every slice.

Each slice starts by reloading the cache, so a rerun after a crash (or a
429) picks up exactly where the last saved slice ended.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from pot_attractions.catalog import Catalog
from pot_attractions.config import HarvestConfig, SLICE_SIZE
from pot_attractions.export import CsvExporter
from pot_attractions.fetch import Fetcher, FixedBackoff
from pot_attractions.record import AttractionRecord
from pot_attractions.store import JsonStore, RecordStore


@dataclass
class HarvestSummary:
    total: int      # ids listed by the API
    fetched: int    # records added to the cache this run
    skipped: int    # ids already cached (or resolving to a cached id)
    records: int    # cache size after the run


def slices(ids: Sequence[str], size: int) -> Iterator[List[str]]:
    """Consecutive chunks of `size`; the last one may be shorter."""
    for i in range(0, len(ids), size):
        yield list(ids[i:i + size])


def progress(index: int, total: int) -> float:
    """Percent done after `index` (1-based) of `total` ids."""
    return round(index / total * 100, 2) if total else 100.0


class Harvester:
    """
    Orchestrates list -> fetch -> merge -> export.

    Args:
        catalog: anything with list_ids(category) and fetch_detail(id).
        store: RecordStore holding the cache.
        exporter: anything with export(records).
        slice_size: ids per checkpoint.
        category: catalog category to harvest.
    """

    def __init__(
        self,
        catalog: Catalog,
        store: RecordStore,
        exporter: CsvExporter,
        *,
        slice_size: int = SLICE_SIZE,
        category: str = "attractions",
    ):
        if slice_size < 1:
            raise ValueError(f"slice_size must be >= 1, got {slice_size}")
        self.catalog = catalog
        self.store = store
        self.exporter = exporter
        self.slice_size = slice_size
        self.category = category

    def run(self) -> HarvestSummary:
        ids = self.catalog.list_ids(self.category)
        total = len(ids)
        num_slices = (total + self.slice_size - 1) // self.slice_size
        print(f"🔄 {total} ids in {num_slices} slice(s) of {self.slice_size}")

        index = 0
        fetched = skipped = 0
        for slice_num, id_slice in enumerate(slices(ids, self.slice_size), start=1):
            index, new = self._run_slice(id_slice, index, total)
            fetched += new
            skipped += len(id_slice) - new
            print(f"🧩 Slice {slice_num}/{num_slices} done ({new} new)")

        records = self.export_only()
        print("✅ saved attractions to csv")
        return HarvestSummary(total=total, fetched=fetched, skipped=skipped, records=records)

    def export_only(self) -> int:
        """Rewrite the CSV from whatever is cached right now."""
        records = self.store.load()
        self.exporter.export(records)
        return len(records)

    def _run_slice(self, id_slice: List[str], index: int, total: int):
        existing = self.store.load()
        known = {r.id for r in existing}

        collected: List[AttractionRecord] = []
        for object_id in id_slice:
            index += 1
            if object_id in known:
                self._report(index, total, "skipped")
                continue
            record = self.catalog.fetch_detail(object_id)
            # the detail id may differ from the listed one
            duplicate = record.id in known
            known.update((object_id, record.id))
            if duplicate:
                self._report(index, total, "skipped")
                continue
            collected.append(record)
            self._report(index, total, "fetched")

        if collected:
            self.store.save(existing + collected)
            print(f"  💾 saved {len(collected)} attraction(s) to cache")
        return index, len(collected)

    def _report(self, index: int, total: int, action: str):
        print(f"{index} {action}. Progress: {progress(index, total)}%")


def build_harvester(config: Optional[HarvestConfig] = None, fetcher: Optional[Fetcher] = None) -> Harvester:
    """Wire the default HTTP/JSON/CSV pieces from a config."""
    config = config or HarvestConfig()
    if fetcher is None:
        fetcher = Fetcher(
            max_retries=config.max_retries,
            backoff=FixedBackoff(config.retry_delay),
            timeout=config.timeout,
        )
    return Harvester(
        Catalog(fetcher, objects_url=config.objects_url),
        JsonStore(config.json_path),
        CsvExporter(config.csv_path),
        slice_size=config.slice_size,
        category=config.category,
    )
