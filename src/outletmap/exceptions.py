"""Custom exception hierarchy for outletmap."""

from __future__ import annotations


class OutletMapError(Exception):
    """Base exception for all outletmap errors."""


class OutletMapConfigError(OutletMapError):
    """Invalid or missing configuration."""


class OutletMapTransportError(OutletMapError):
    """HTTP-level failure (network, non-2xx, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class OutletMapPayloadError(OutletMapError):
    """Response JSON did not have the expected shape."""

    def __init__(self, message: str, *, url: str = "") -> None:
        self.url = url
        super().__init__(message)
