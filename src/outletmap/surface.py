"""Headless map surface.

Binds the outlet store and the marker state machine to per-outlet marker
handles and a viewport. Pointer events are fed in by the embedding UI;
:meth:`MapSurface.markers` yields what to draw for the current frame.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable

from outletmap.config import MapConfig
from outletmap.models.marker import IconSpec, MarkerView, PopupContent
from outletmap.models.outlet import Outlet
from outletmap.state.animation import OutletId
from outletmap.state.markers import MarkerStateMachine
from outletmap.store import OutletStore

_logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class Transition:
    """A smooth viewport move."""

    center: tuple[float, float]
    zoom: int
    duration: float


@dataclasses.dataclass
class Viewport:
    center: tuple[float, float]
    zoom: int
    last_transition: Transition | None = None

    def fly_to(self, center: tuple[float, float], zoom: int, *, duration: float) -> Transition:
        transition = Transition(center=center, zoom=zoom, duration=duration)
        self.center = center
        self.zoom = zoom
        self.last_transition = transition
        return transition


@dataclasses.dataclass
class MarkerHandle:
    """A mounted marker. Only mounted markers can open their callout."""

    outlet_id: OutletId
    popup_open: bool = False


def icon_for(size: int, colorful: bool = False, bordered: bool = False) -> IconSpec:
    return IconSpec.build(size, colorful=colorful, bordered=bordered)


class MapSurface:
    """Presentation layer consuming the store and the marker state machine."""

    def __init__(
        self,
        config: MapConfig,
        store: OutletStore,
        state: MarkerStateMachine,
        *,
        on_render: Callable[[], None] | None = None,
    ) -> None:
        self._config = config
        self._store = store
        self._state = state
        self._on_render = on_render
        self._handles: dict[OutletId, MarkerHandle] = {}
        self.viewport = Viewport(center=config.center, zoom=config.zoom)
        self.revision = 0
        state.add_listener(self.invalidate)

    def invalidate(self) -> None:
        """Mark the drawn markers stale and ask the embedding UI to redraw."""
        self.revision += 1
        if self._on_render is not None:
            self._on_render()

    # ------------------------------------------------------------------
    # Marker lifecycle
    # ------------------------------------------------------------------

    def mount(self, outlet_id: OutletId) -> MarkerHandle | None:
        if outlet_id not in self._store:
            return None
        handle = self._handles.get(outlet_id)
        if handle is None:
            handle = MarkerHandle(outlet_id=outlet_id)
            self._handles[outlet_id] = handle
        return handle

    def unmount(self, outlet_id: OutletId) -> None:
        self._handles.pop(outlet_id, None)

    def mount_all(self) -> None:
        """Mount a marker for every stored outlet, dropping handles for outlets that left."""
        current = {outlet.id for outlet in self._store}
        for outlet_id in list(self._handles):
            if outlet_id not in current:
                del self._handles[outlet_id]
        for outlet_id in current:
            self.mount(outlet_id)

    def handle(self, outlet_id: OutletId) -> MarkerHandle | None:
        return self._handles.get(outlet_id)

    @property
    def open_popup_id(self) -> OutletId | None:
        for handle in self._handles.values():
            if handle.popup_open:
                return handle.outlet_id
        return None

    # ------------------------------------------------------------------
    # Pointer input
    # ------------------------------------------------------------------

    def pointer_enter(self, outlet_id: OutletId) -> None:
        self._state.on_hover_start(outlet_id)

    def pointer_leave(self, outlet_id: OutletId | None = None) -> None:
        self._state.on_hover_end()

    # ------------------------------------------------------------------
    # Focus
    # ------------------------------------------------------------------

    def open_popup(self, outlet_id: OutletId) -> bool:
        handle = self._handles.get(outlet_id)
        if handle is None:
            return False
        for other in self._handles.values():
            other.popup_open = False
        handle.popup_open = True
        self.invalidate()
        return True

    def close_popup(self) -> None:
        for handle in self._handles.values():
            handle.popup_open = False
        self.invalidate()

    def focus(self, outlet: Outlet) -> bool:
        """Open *outlet*'s callout and fly to it at the current zoom.

        Returns ``False`` without side effects when the marker is not mounted.
        """
        if not self.open_popup(outlet.id):
            return False
        self.viewport.fly_to(outlet.position, self.viewport.zoom, duration=self._config.fly_duration)
        return True

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def popup_for(self, outlet: Outlet) -> PopupContent:
        return PopupContent.for_outlet(outlet)

    def marker_view(self, outlet: Outlet) -> MarkerView:
        colorful = self._state.is_highlighted(outlet)
        bordered = self._state.is_bordered(outlet.id)
        return MarkerView(
            outlet=outlet,
            icon=icon_for(self._state.icon_size(outlet.id), colorful, bordered),
            colorful=colorful,
            bordered=bordered,
            show_circle=self._state.hovered == outlet.id,
        )

    def markers(self) -> list[MarkerView]:
        return [self.marker_view(outlet) for outlet in self._store]
