"""Render snapshots produced by the map surface."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from outletmap._constants import (
    BORDERED_ICON_CLASS,
    COLORFUL_ICON_URL,
    ICON_CLASS,
    PLAIN_ICON_URL,
    POPUP_ANCHOR,
    POPUP_LINK_LABEL,
)
from outletmap.models.outlet import Outlet


class IconSpec(BaseModel):
    """Marker icon parameters, anchored on the icon centre."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    url: str
    size: tuple[int, int]
    anchor: tuple[float, float]
    popup_anchor: tuple[int, int] = POPUP_ANCHOR
    class_name: str = ICON_CLASS

    @classmethod
    def build(cls, size: int, *, colorful: bool = False, bordered: bool = False) -> IconSpec:
        class_name = f"{ICON_CLASS} {BORDERED_ICON_CLASS}" if bordered else ICON_CLASS
        return cls(
            url=COLORFUL_ICON_URL if colorful else PLAIN_ICON_URL,
            size=(size, size),
            anchor=(size / 2, size / 2),
            class_name=class_name,
        )


class PopupContent(BaseModel):
    """Detail callout for one outlet."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    address: str
    link_url: str
    link_label: str = POPUP_LINK_LABEL

    @classmethod
    def for_outlet(cls, outlet: Outlet) -> PopupContent:
        return cls(name=outlet.name, address=outlet.address, link_url=outlet.external_link_url)


class MarkerView(BaseModel):
    """Everything needed to draw one outlet marker for the current frame."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    outlet: Outlet
    icon: IconSpec
    colorful: bool
    bordered: bool
    show_circle: bool
