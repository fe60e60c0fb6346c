# pot_attractions/config.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

BASE_URL = "https://rit.poland.travel/api/v1/objects"

CATEGORY_CODES: Dict[str, str] = {
    "attractions": "C004",  # Atrakcje turystyczne
}

OUTPUT_DIR = Path("out")
JSON_NAME = "attractions.json"
CSV_NAME = "attractions.csv"

SLICE_SIZE = 20
MAX_RETRIES = 10
RETRY_DELAY = 60.0       # seconds between attempts
REQUEST_TIMEOUT = 30.0   # seconds per request


@dataclass
class HarvestConfig:
    """Everything a harvest run needs; defaults reproduce the plain run."""
    objects_url: str = BASE_URL
    category: str = "attractions"
    output_dir: Path = OUTPUT_DIR
    slice_size: int = SLICE_SIZE
    max_retries: int = MAX_RETRIES
    retry_delay: float = RETRY_DELAY
    timeout: float = REQUEST_TIMEOUT

    def __post_init__(self):
        self.output_dir = Path(self.output_dir)
        if self.slice_size < 1:
            raise ValueError(f"slice_size must be >= 1, got {self.slice_size}")
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        if self.retry_delay < 0:
            raise ValueError(f"retry_delay must be >= 0, got {self.retry_delay}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be > 0, got {self.timeout}")

    @property
    def json_path(self) -> Path:
        return self.output_dir / JSON_NAME

    @property
    def csv_path(self) -> Path:
        return self.output_dir / CSV_NAME
