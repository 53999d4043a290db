from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Union

from .errors import ConfigurationError, MalformedRowError
from .models import County


logger = logging.getLogger(__name__)

Source = Union[str, Path, Iterable[str]]


def parse_row(row: List[str], line_number: int) -> County:
    cells = [cell.strip() for cell in row]
    if len(cells) < 2 or not cells[1]:
        raise MalformedRowError(line_number, row, "missing county id")
    url_prefix = cells[2] if len(cells) > 2 and cells[2] else None
    return County(id=cells[1], name=cells[0], url_prefix=url_prefix)


def _read_lines(source: Source) -> List[str]:
    if isinstance(source, (str, Path)):
        path = Path(source)
        try:
            with path.open(encoding="utf-8", newline="") as handle:
                return handle.readlines()
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigurationError(
                f"Unable to read county registry {str(path)!r}: {exc}"
            ) from exc
    try:
        return list(source)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Unable to read county registry: {exc}") from exc


def load_registry(
    source: Source,
    on_error: Optional[Callable[[MalformedRowError], None]] = None,
) -> Dict[str, County]:
    """Load counties from ``name,id,url_prefix`` rows.

    Rows without an id are skipped and reported through ``on_error``.
    A later row with an id already seen replaces the earlier county.
    """
    counties: Dict[str, County] = {}
    for line_number, row in enumerate(csv.reader(_read_lines(source)), start=1):
        if not any(cell.strip() for cell in row):
            continue
        try:
            county = parse_row(row, line_number)
        except MalformedRowError as exc:
            logger.warning("skipping %s", exc)
            if on_error:
                on_error(exc)
            continue
        if county.id in counties:
            logger.debug("county id %s redefined on line %d", county.id, line_number)
        counties[county.id] = county
    return counties
