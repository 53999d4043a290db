from __future__ import annotations

import http.client
import logging
import urllib.parse
import zlib
from typing import Dict, Optional

from .errors import TransportError
from .http_client import HttpClient
from .settings import STATE_CODE, Settings


logger = logging.getLogger(__name__)


def build_form_fields(county_id: str, settings: Settings) -> Dict[str, object]:
    return {
        "pi_state": STATE_CODE,
        "pi_sale_type": settings.sale_type,
        "pi_venue_group_id": county_id,
        "pi_adjudged_from": settings.min_adjudged_value,
    }


def build_request(county_id: str, settings: Settings, client: HttpClient) -> dict:
    return client.build_form_request(
        settings.endpoint_url, build_form_fields(county_id, settings)
    )


def _allowed_hosts(settings: Settings):
    hostname = urllib.parse.urlparse(settings.endpoint_url).hostname
    return {hostname} if hostname else None


def fetch_listings_html(
    county_id: str, settings: Settings, client: Optional[HttpClient] = None
) -> str:
    """POST the search form for one county and return the result page HTML."""
    client = client or HttpClient(timeout=settings.timeout)
    request_spec = build_request(county_id, settings, client)
    logger.debug("POST %s venue=%s", request_spec["url"], county_id)
    try:
        response = client.request(request_spec, allowed_hosts=_allowed_hosts(settings))
    except (
        OSError, EOFError, ValueError, http.client.HTTPException, zlib.error
    ) as exc:
        raise TransportError(county_id, f"request failed: {exc}") from exc
    text = response.get("text") or ""
    if not text.strip():
        raise TransportError(county_id, "empty response body")
    if response.get("truncated"):
        logger.warning("response for county %s truncated", county_id)
    return text
