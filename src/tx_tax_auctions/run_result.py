from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from .models import ListingRecord


@dataclass
class RunResult:
    run_id: str
    started_at: str
    finished_at: str
    records: List[ListingRecord]
    counties_attempted: int
    failures: List[Dict] = field(default_factory=list)
    log_entries: List[Dict] = field(default_factory=list)
    dropped: int = 0

    def summary(self) -> dict:
        statuses = [entry.get("status") for entry in self.log_entries]
        return {
            "run_id": self.run_id,
            "total_counties": self.counties_attempted,
            "succeeded": statuses.count("success"),
            "empty": statuses.count("empty"),
            "failed": statuses.count("failed"),
            "total_items": len(self.records),
            "dropped": self.dropped,
        }
