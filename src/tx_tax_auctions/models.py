from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class County:
    id: str
    name: str
    url_prefix: Optional[str] = None


@dataclass(frozen=True)
class ListingRecord:
    county: County
    account_number: Optional[str] = None
    adjudged_value: float = 0.0
    minimum_bid: float = 0.0

    @property
    def detail_url(self) -> Optional[str]:
        """Appraisal district page for the property, when it can be built."""
        if not self.county.url_prefix or not self.account_number:
            return None
        return self.county.url_prefix + self.account_number

    def is_valid(self) -> bool:
        return all(
            math.isfinite(value) and value >= 0
            for value in (self.adjudged_value, self.minimum_bid)
        )

    def to_dict(self) -> dict:
        return {
            "county": self.county.name,
            "county_id": self.county.id,
            "account_number": self.account_number or "",
            "adjudged_value": self.adjudged_value,
            "minimum_bid": self.minimum_bid,
            "detail_url": self.detail_url or "",
        }
