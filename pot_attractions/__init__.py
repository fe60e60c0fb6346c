"""
POT Attractions Harvester
Pull tourism attractions from the Polish Tourism Organisation catalog,
keep them in a resumable JSON cache and export them to CSV.
"""
from pot_attractions.config import HarvestConfig
from pot_attractions.record import AttractionRecord, CSV_COLUMNS
from pot_attractions.harvest import Harvester, HarvestSummary, build_harvester

__version__ = "0.1.0"
__all__ = [
    "AttractionRecord",
    "CSV_COLUMNS",
    "HarvestConfig",
    "Harvester",
    "HarvestSummary",
    "build_harvester",
]
