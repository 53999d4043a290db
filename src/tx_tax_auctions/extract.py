"""Listing extraction from the acttax results page.

Each listing sits in a ``td.repTblCell`` container holding a small table
of ``td.repText`` cells. A cell starts with a ``span`` label and the value
follows as the cell's own text::

    <td class="repText"><span>Adjudged Value:</span>&nbsp;$150,000</td>

Field lookups are relative to the row container so that a row missing a
label can never pick up the value from the next listing.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from parsel import Selector

from .errors import (
    DuplicateFieldError,
    ExtractionProblem,
    FieldNotFoundError,
    NormalizationError,
)
from .models import County, ListingRecord
from .normalize import clean_cell_text, parse_currency


ROW_XPATH = '//td[@class="repTblCell"]'
FIELD_XPATH = './/td[@class="repText"]/span[contains(., "{label}")]/..'
VALUE_TEXT_XPATH = "./text() | ./*[not(self::span)]//text()"

FIELD_LABELS = {
    "account_number": "Account Number",
    "adjudged_value": "Adjudged Value",
    "minimum_bid": "Estimated Minimum Bid",
}

ProblemCallback = Callable[[ExtractionProblem], None]


def _report(on_problem: Optional[ProblemCallback], problem: ExtractionProblem):
    if on_problem:
        on_problem(problem)


def find_rows(html: str) -> List[Selector]:
    return Selector(text=html or "").xpath(ROW_XPATH)


def cell_text(cell: Selector) -> str:
    return clean_cell_text("".join(cell.xpath(VALUE_TEXT_XPATH).getall()))


def field_text(row: Selector, label: str):
    """Return (text, match_count) for one label inside one row."""
    cells = row.xpath(FIELD_XPATH.format(label=label))
    if len(cells) != 1:
        return None, len(cells)
    return cell_text(cells[0]), 1


def _money(county, row_index, field, text, on_problem) -> float:
    value = parse_currency(text)
    if value is None:
        if text is not None:
            _report(on_problem, NormalizationError(county.id, row_index, field, text))
        return 0.0
    return value


def parse_row(
    row: Selector,
    county: County,
    row_index: int = 0,
    on_problem: Optional[ProblemCallback] = None,
) -> ListingRecord:
    texts = {}
    for field, label in FIELD_LABELS.items():
        text, matches = field_text(row, label)
        if matches == 0:
            _report(on_problem, FieldNotFoundError(county.id, row_index, field))
        elif matches > 1:
            _report(
                on_problem, DuplicateFieldError(county.id, row_index, field, matches)
            )
        texts[field] = text

    return ListingRecord(
        county=county,
        account_number=texts["account_number"] or None,
        adjudged_value=_money(
            county, row_index, "adjudged_value", texts["adjudged_value"], on_problem
        ),
        minimum_bid=_money(
            county, row_index, "minimum_bid", texts["minimum_bid"], on_problem
        ),
    )


def extract_listings(
    html: str,
    county: County,
    on_problem: Optional[ProblemCallback] = None,
) -> List[ListingRecord]:
    return [
        parse_row(row, county, row_index, on_problem)
        for row_index, row in enumerate(find_rows(html))
    ]
