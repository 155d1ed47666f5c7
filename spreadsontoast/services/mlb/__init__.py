"""MLB services module."""

from spreadsontoast.services.mlb.mlb_api import MLBAPIError, MLBStatsAPIClient
from spreadsontoast.services.mlb.ingest import MLBDataIngestor, SyncResult
from spreadsontoast.services.mlb.schedule_difficulty import (
    compute_schedule_difficulty,
    get_schedule_difficulty,
)

__all__ = [
    "MLBAPIError",
    "MLBStatsAPIClient",
    "MLBDataIngestor",
    "SyncResult",
    "compute_schedule_difficulty",
    "get_schedule_difficulty",
]
