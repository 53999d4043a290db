import re
from typing import Optional


_WHITESPACE_RE = re.compile(r"\s+")
_CURRENCY_CHARS_RE = re.compile(r"[$,]")
_AMOUNT_RE = re.compile(r"[0-9]+(\.[0-9]+)?")
NBSP = "\u00a0"


def clean_cell_text(value: Optional[str]) -> str:
    if value is None:
        return ""
    return str(value).replace(NBSP, " ").strip()


def normalize_name(value: Optional[str]) -> str:
    if value is None:
        return ""
    return _WHITESPACE_RE.sub(" ", str(value)).strip().casefold()


def parse_currency(text: Optional[str]) -> Optional[float]:
    """Parse "$1,234.50" style amounts.

    Returns None unless the text is a plain non-negative decimal; callers
    decide what to substitute.
    """
    if text is None:
        return None
    cleaned = _CURRENCY_CHARS_RE.sub("", str(text)).strip()
    if not _AMOUNT_RE.fullmatch(cleaned):
        return None
    return float(cleaned)
