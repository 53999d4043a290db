"""Package initializer for `tx_tax_auctions`."""

from .models import County, ListingRecord
from .pipeline import SearchPipeline
from .run_result import RunResult

__all__ = ["County", "ListingRecord", "RunResult", "SearchPipeline"]
