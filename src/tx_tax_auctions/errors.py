from __future__ import annotations

from typing import Optional, Sequence


class TaxAuctionError(Exception):
    """Base class for every error raised by the search pipeline."""


class ConfigurationError(TaxAuctionError):
    """Registry or settings are unusable. Aborts the run."""


class MalformedRowError(TaxAuctionError):
    def __init__(self, line_number: int, row: Sequence[str], reason: str):
        self.line_number = line_number
        self.row = list(row)
        self.reason = reason
        super().__init__(f"registry line {line_number}: {reason}: {self.row!r}")


class TransportError(TaxAuctionError):
    def __init__(self, county_id: str, message: str):
        self.county_id = county_id
        super().__init__(f"county {county_id}: {message}")


class ExtractionProblem(TaxAuctionError):
    """Recoverable problem with one field of one listing row."""

    def __init__(self, county_id: str, row_index: int, field: str, message: str):
        self.county_id = county_id
        self.row_index = row_index
        self.field = field
        super().__init__(
            f"county {county_id} row {row_index} field {field}: {message}"
        )


class FieldNotFoundError(ExtractionProblem):
    def __init__(self, county_id: str, row_index: int, field: str):
        super().__init__(county_id, row_index, field, "label not found")


class DuplicateFieldError(ExtractionProblem):
    def __init__(self, county_id: str, row_index: int, field: str, matches: int):
        self.matches = matches
        super().__init__(
            county_id, row_index, field, f"{matches} matching cells, value ignored"
        )


class NormalizationError(ExtractionProblem):
    def __init__(
        self, county_id: str, row_index: int, field: str, text: Optional[str]
    ):
        self.text = text
        super().__init__(
            county_id, row_index, field, f"unparseable amount {text!r}, using 0"
        )
