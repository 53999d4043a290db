from __future__ import annotations

import logging
from typing import Iterable, List

from .models import ListingRecord


logger = logging.getLogger(__name__)


def rank(records: Iterable[ListingRecord]) -> List[ListingRecord]:
    """Highest adjudged value first; equal values keep their input order."""
    return sorted(records, key=lambda record: record.adjudged_value, reverse=True)


class ResultAggregator:
    """Collects ranked per-county batches for a single run."""

    def __init__(self):
        self._records: List[ListingRecord] = []
        self.dropped = 0

    def add(self, batch: Iterable[ListingRecord]) -> List[ListingRecord]:
        valid = []
        for record in batch:
            if record.is_valid():
                valid.append(record)
                continue
            self.dropped += 1
            logger.warning(
                "dropping listing %s in %s: amounts must be non-negative",
                record.account_number or "?",
                record.county.name,
            )
        ranked = rank(valid)
        if ranked:
            self._records.extend(ranked)
        return ranked

    @property
    def records(self) -> List[ListingRecord]:
        return list(self._records)

    def __len__(self):
        return len(self._records)


def aggregate(batches: Iterable[Iterable[ListingRecord]]) -> List[ListingRecord]:
    aggregator = ResultAggregator()
    for batch in batches:
        aggregator.add(batch)
    return aggregator.records
