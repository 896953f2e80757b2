from __future__ import annotations

from outletmap.config import MapConfig
from outletmap.models.outlet import Outlet
from outletmap.state.animation import IconAnimator
from outletmap.state.markers import MarkerStateMachine
from outletmap.state.scheduler import ManualFrameScheduler
from outletmap.store import OutletStore
from outletmap.surface import MapSurface, icon_for

A = Outlet(id=1, name="A", address="Jalan A", lat=3.10, lng=101.60, radius=500, waze_url="https://waze.com/ul?a")
B = Outlet(id=2, name="B", lat=3.1005, lng=101.60, radius=400)


def _surface() -> tuple[MapSurface, MarkerStateMachine, ManualFrameScheduler, OutletStore]:
    store = OutletStore()
    store.replace([A, B])
    scheduler = ManualFrameScheduler()
    machine = MarkerStateMachine(store, IconAnimator(scheduler))
    surface = MapSurface(MapConfig(), store, machine)
    surface.mount_all()
    return surface, machine, scheduler, store


def test_idle_markers_render_plain() -> None:
    surface, _, _, _ = _surface()

    views = surface.markers()

    assert [v.outlet.id for v in views] == [1, 2]
    for view in views:
        assert view.icon.size == (30, 30)
        assert view.icon.anchor == (15, 15)
        assert view.icon.class_name == "custom-icon-shadow"
        assert view.icon.url.endswith("_white.png")
        assert not view.bordered
        assert not view.show_circle


def test_hover_renders_circle_borders_and_growth() -> None:
    surface, _, scheduler, _ = _surface()

    surface.pointer_enter(1)
    scheduler.run_until_idle()
    views = {v.outlet.id: v for v in surface.markers()}

    assert views[1].show_circle
    assert not views[2].show_circle
    assert views[1].bordered and views[2].bordered
    assert views[2].icon.class_name == "custom-icon-shadow bordered-icon"
    assert views[1].icon.size == (40, 40)

    surface.pointer_leave(1)
    scheduler.run_until_idle()
    assert all(not v.bordered and v.icon.size == (30, 30) for v in surface.markers())


def test_highlight_renders_colorful_icon() -> None:
    surface, machine, _, _ = _surface()

    machine.set_highlighted_names(["B"])
    views = {v.outlet.id: v for v in surface.markers()}

    assert views[2].colorful
    assert views[2].icon.url.endswith(".svg")
    assert not views[1].colorful


def test_only_one_popup_open() -> None:
    surface, _, _, _ = _surface()

    surface.focus(A)
    surface.focus(B)

    assert surface.open_popup_id == 2
    assert not surface.handle(1).popup_open  # type: ignore[union-attr]
    surface.close_popup()
    assert surface.open_popup_id is None


def test_mount_all_drops_stale_handles() -> None:
    surface, _, _, store = _surface()

    store.replace([B])
    surface.mount_all()

    assert surface.handle(1) is None
    assert surface.handle(2) is not None
    assert surface.mount(99) is None


def test_popup_content() -> None:
    surface, _, _, _ = _surface()

    popup = surface.popup_for(A)

    assert popup.name == "A"
    assert popup.address == "Jalan A"
    assert popup.link_url == "https://waze.com/ul?a"
    assert popup.link_label == "Open in Waze"


def test_icon_for_anchor_is_centre() -> None:
    icon = icon_for(35, colorful=True, bordered=True)

    assert icon.anchor == (17.5, 17.5)
    assert icon.popup_anchor == (0, -20)


def test_state_changes_and_frames_request_render() -> None:
    store = OutletStore()
    store.replace([A, B])
    scheduler = ManualFrameScheduler()
    machine = MarkerStateMachine(store, IconAnimator(scheduler, min_size=30, max_size=40))
    renders: list[int] = []
    surface = MapSurface(MapConfig(), store, machine, on_render=lambda: renders.append(surface.revision))
    surface.mount_all()

    surface.pointer_enter(1)
    assert renders == [1, 2]

    scheduler.run_until_idle()
    assert len(renders) == 11

    surface.focus(B)
    machine.set_highlighted_names(["B"])
    assert surface.revision == 13
    assert renders[-1] == 13


def test_focus_on_unmounted_marker_does_not_render() -> None:
    surface, _, _, _ = _surface()
    before = surface.revision

    assert not surface.focus(Outlet(id=99, name="Ghost", lat=0, lng=0, radius=0))
    assert surface.revision == before
