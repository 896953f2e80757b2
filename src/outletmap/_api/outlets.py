"""Outlet list endpoint.

Endpoint:
  - GET /fetchOutlet -> JSON array of outlet objects
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from outletmap._transport import Transport
from outletmap.config import MapConfig
from outletmap.exceptions import OutletMapPayloadError
from outletmap.models.outlet import Outlet

_logger = logging.getLogger(__name__)


def parse_outlets(payload: Any, *, url: str = "") -> list[Outlet]:
    """Validate a decoded outlet payload into ordered :class:`Outlet` records."""
    if not isinstance(payload, list):
        raise OutletMapPayloadError(
            f"Expected a JSON array of outlets, got {type(payload).__name__}",
            url=url,
        )
    try:
        return [Outlet.model_validate(item) for item in payload]
    except ValidationError as exc:
        raise OutletMapPayloadError(f"Malformed outlet record: {exc}", url=url) from exc


async def fetch_outlets(config: MapConfig, transport: Transport) -> list[Outlet]:
    """Fetch and parse the full outlet set in one request."""
    payload = await transport.get_json(config.outlets_url)
    outlets = parse_outlets(payload, url=config.outlets_url)
    _logger.debug("Fetched %d outlets", len(outlets))
    return outlets
