from __future__ import annotations

from outletmap.commands import MapCommandChannel
from outletmap.config import MapConfig
from outletmap.models.outlet import Outlet
from outletmap.state.animation import IconAnimator
from outletmap.state.markers import MarkerStateMachine
from outletmap.state.scheduler import ManualFrameScheduler
from outletmap.store import OutletStore
from outletmap.surface import MapSurface

OUTLETS = [
    Outlet(id=1, name="McDonald's SS2 DT", lat=3.1180, lng=101.6220, radius=3000),
    Outlet(id=2, name="McDonald's Cheras", lat=3.0850, lng=101.7440, radius=2500),
    Outlet(id=3, name="McDonald's Cheras Selatan", lat=3.0300, lng=101.7600, radius=2500),
]


def _wire(*, mount: bool = True) -> tuple[MapCommandChannel, MarkerStateMachine, MapSurface]:
    store = OutletStore()
    store.replace(OUTLETS)
    machine = MarkerStateMachine(store, IconAnimator(ManualFrameScheduler()))
    surface = MapSurface(MapConfig(), store, machine)
    if mount:
        surface.mount_all()
    return MapCommandChannel(machine, store, surface.focus), machine, surface


class TestHighlightOutletsByName:
    def test_sets_highlight(self) -> None:
        channel, machine, _ = _wire()

        channel.highlight_outlets_by_name(["Cheras"])

        assert machine.highlighted_names == ("Cheras",)
        assert [o.id for o in OUTLETS if machine.is_highlighted(o)] == [2, 3]

    def test_empty_list_clears(self) -> None:
        channel, machine, _ = _wire()
        channel.highlight_outlets_by_name(["Cheras"])

        channel.highlight_outlets_by_name([])

        assert not any(machine.is_highlighted(o) for o in OUTLETS)

    def test_omitted_argument_is_no_op(self) -> None:
        channel, machine, _ = _wire()
        channel.highlight_outlets_by_name(["Cheras"])

        channel.highlight_outlets_by_name()

        assert machine.highlighted_names == ("Cheras",)

    def test_idempotent(self) -> None:
        channel, machine, _ = _wire()

        channel.highlight_outlets_by_name(["SS2"])
        channel.highlight_outlets_by_name(["SS2"])

        assert machine.highlighted_names == ("SS2",)


class TestOpenOutletPopup:
    def test_first_match_wins(self) -> None:
        channel, _, surface = _wire()

        channel.open_outlet_popup("Cheras")

        assert surface.open_popup_id == 2
        assert surface.viewport.center == (3.0850, 101.7440)

    def test_keeps_zoom_and_uses_bounded_transition(self) -> None:
        channel, _, surface = _wire()
        zoom = surface.viewport.zoom

        channel.open_outlet_popup("SS2")

        transition = surface.viewport.last_transition
        assert transition is not None
        assert transition.zoom == zoom
        assert transition.duration == 0.5

    def test_no_match_is_silent(self) -> None:
        channel, _, surface = _wire()

        channel.open_outlet_popup("Sunway")

        assert surface.open_popup_id is None
        assert surface.viewport.last_transition is None

    def test_unmounted_marker_drops_request(self) -> None:
        channel, _, surface = _wire(mount=False)

        channel.open_outlet_popup("SS2")

        assert surface.open_popup_id is None
        assert surface.viewport.center == MapConfig().center

    def test_non_string_is_silent(self) -> None:
        channel, _, surface = _wire()

        channel.open_outlet_popup(None)  # type: ignore[arg-type]

        assert surface.open_popup_id is None
