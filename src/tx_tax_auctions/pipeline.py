from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Callable, Dict, List, Mapping, Optional, Sequence
from uuid import uuid4

from .aggregate import ResultAggregator
from .errors import TransportError
from .extract import extract_listings
from .http_client import HttpClient
from .models import County
from .normalize import normalize_name
from .query import build_request, fetch_listings_html
from .run_result import RunResult
from .settings import Settings, get_settings


logger = logging.getLogger(__name__)


def select_counties(
    registry: Mapping[str, County], counties: Optional[Sequence[str]] = None
) -> List[County]:
    """Registry order, optionally limited to the given ids or names."""
    if not counties:
        return list(registry.values())
    wanted = {normalize_name(c) for c in counties if c and c.strip()}
    return [
        county
        for county in registry.values()
        if normalize_name(county.id) in wanted or normalize_name(county.name) in wanted
    ]


class SearchPipeline:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[HttpClient] = None,
        sleep_fn: Callable[[float], None] = time.sleep,
        log_fn: Optional[Callable[[Dict], None]] = None,
    ):
        self.settings = settings or get_settings()
        self.client = client or HttpClient(timeout=self.settings.timeout)
        self.sleep_fn = sleep_fn
        self.log_fn = log_fn

    def _log(self, entries: List[Dict], payload: Dict) -> None:
        entries.append(payload)
        if self.log_fn:
            self.log_fn(payload)

    def plan(
        self, registry: Mapping[str, County], counties: Optional[Sequence[str]] = None
    ) -> List[Dict]:
        planned = []
        for county in select_counties(registry, counties):
            request_spec = build_request(county.id, self.settings, self.client)
            planned.append(
                {
                    "county": county.name,
                    "county_id": county.id,
                    "url": request_spec["url"],
                    "data": request_spec["data"].decode("ascii"),
                }
            )
        return planned

    def run(
        self, registry: Mapping[str, County], counties: Optional[Sequence[str]] = None
    ) -> RunResult:
        run_id = uuid4().hex
        started_at = datetime.now(timezone.utc).isoformat()
        aggregator = ResultAggregator()
        failures: List[Dict] = []
        log_entries: List[Dict] = []
        selected = select_counties(registry, counties)

        for idx, county in enumerate(selected):
            if idx and self.settings.pause_seconds:
                self.sleep_fn(self.settings.pause_seconds)
            problems = []
            payload = {"county": county.name, "county_id": county.id}
            try:
                html = fetch_listings_html(county.id, self.settings, client=self.client)
                listings = extract_listings(html, county, on_problem=problems.append)
            except TransportError as exc:
                logger.warning("skipping %s: %s", county.name, exc)
                error = str(exc)
            except Exception as exc:
                logger.exception("extraction failed for %s", county.name)
                error = str(exc)
            else:
                error = None
            if error is not None:
                failures.append(
                    {"county": county.name, "county_id": county.id, "error": error}
                )
                payload.update(items_found=0, problems=0, status="failed", error=error)
                self._log(log_entries, payload)
                continue

            for problem in problems:
                logger.debug("%s", problem)
            ranked = aggregator.add(listings)
            payload.update(
                items_found=len(ranked),
                problems=len(problems),
                status="success" if ranked else "empty",
            )
            self._log(log_entries, payload)

        return RunResult(
            run_id=run_id,
            started_at=started_at,
            finished_at=datetime.now(timezone.utc).isoformat(),
            records=aggregator.records,
            counties_attempted=len(selected),
            failures=failures,
            log_entries=log_entries,
            dropped=aggregator.dropped,
        )
