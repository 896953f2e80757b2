"""Outlet model."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from outletmap.models._base import safe_str


class Outlet(BaseModel):
    """A point of interest with a position and a service radius.

    Coordinates and radii are assumed to be pre-validated by the
    upstream service; only shape coercion happens here.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    id: int | str
    """Opaque identifier, unique within one fetched set."""
    name: str
    """Display name, matched by substring for highlight/open requests."""
    address: str = ""
    lat: float
    """Latitude in degrees."""
    lng: float
    """Longitude in degrees."""
    radius: float = Field(default=0.0, ge=0)
    """Service-area radius in metres."""
    external_link_url: str = Field(
        default="",
        validation_alias=AliasChoices("waze_url", "external_link_url", "externalLinkUrl"),
    )
    """External navigation link, display-only."""

    @field_validator("address", "external_link_url", mode="before")
    @classmethod
    def _coerce_optional_str(cls, value: Any) -> str:
        return safe_str(value) or ""

    @property
    def position(self) -> tuple[float, float]:
        return self.lat, self.lng
