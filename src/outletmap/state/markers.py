"""Marker visual state machine.

Per outlet, a marker moves ``idle -> growing -> steady`` while hovered and
``growing/steady -> shrinking -> idle`` once the pointer leaves. At most one
outlet is hovered at a time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from enum import StrEnum
from typing import Any

from outletmap.geometry import overlaps_of
from outletmap.models.outlet import Outlet
from outletmap.state.animation import Direction, IconAnimator, OutletId
from outletmap.store import OutletStore

_logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class MarkerPhase(StrEnum):
    IDLE = "idle"
    GROWING = "growing"
    STEADY = "steady"
    SHRINKING = "shrinking"


def _valid_fragments(fragments: Any) -> tuple[str, ...] | None:
    if isinstance(fragments, (str, bytes)) or not isinstance(fragments, Sequence):
        return None
    if not all(isinstance(fragment, str) for fragment in fragments):
        return None
    return tuple(fragments)


class MarkerStateMachine:
    """Hover, border, highlight and icon-size state for every marker.

    This is the only component allowed to mutate that state.
    """

    def __init__(
        self,
        store: OutletStore,
        animator: IconAnimator,
        *,
        force_colorful: bool = False,
    ) -> None:
        self._store = store
        self._animator = animator
        self.force_colorful = force_colorful
        self._hovered: OutletId | None = None
        self._border: frozenset[OutletId] = frozenset()
        self._highlighted: tuple[str, ...] = ()
        self._listeners: list[Listener] = []
        if animator.on_change is None:
            animator.on_change = self._on_icon_size

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def hovered(self) -> OutletId | None:
        return self._hovered

    @property
    def border_set(self) -> frozenset[OutletId]:
        return self._border

    @property
    def highlighted_names(self) -> tuple[str, ...]:
        return self._highlighted

    @property
    def animator(self) -> IconAnimator:
        return self._animator

    def icon_size(self, outlet_id: OutletId) -> int:
        return self._animator.size_of(outlet_id)

    def is_bordered(self, outlet_id: OutletId) -> bool:
        return outlet_id in self._border

    def is_highlighted(self, outlet: Outlet) -> bool:
        if self.force_colorful:
            return True
        return any(fragment in outlet.name for fragment in self._highlighted)

    def phase(self, outlet_id: OutletId) -> MarkerPhase:
        job = self._animator.active_job(outlet_id)
        if job is not None:
            return MarkerPhase.GROWING if job.direction is Direction.GROW else MarkerPhase.SHRINKING
        if outlet_id == self._hovered:
            return MarkerPhase.STEADY
        return MarkerPhase.IDLE

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* after every hover, highlight or icon-size change.

        Returns a callable that removes the listener.
        """
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _remove

    def _on_icon_size(self, outlet_id: OutletId, size: int) -> None:
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                _logger.debug("Marker state listener failed", exc_info=True)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def on_hover_start(self, outlet_id: OutletId) -> None:
        """Hover *outlet_id*: flag it and its overlapping neighbours, grow its icon."""
        target = self._store.get(outlet_id)
        if target is None:
            _logger.debug("Ignoring hover on unknown outlet %r", outlet_id)
            return
        self._hovered = outlet_id
        self._border = frozenset(overlaps_of(target, self._store) | {outlet_id})
        self._animator.start(outlet_id, Direction.GROW)
        self._notify()

    def on_hover_end(self) -> None:
        """Clear hover and borders; shrink every tracked icon independently."""
        self._hovered = None
        self._border = frozenset()
        for outlet_id in self._animator.sizes:
            self._animator.start(outlet_id, Direction.SHRINK)
        self._notify()

    def set_highlighted_names(self, fragments: Sequence[str] | None) -> bool:
        """Replace the highlight fragments.

        ``None`` and anything that is not a sequence of strings are ignored.
        An empty sequence clears highlighting. Returns whether the state
        was replaced.
        """
        if fragments is None:
            return False
        valid = _valid_fragments(fragments)
        if valid is None:
            _logger.debug("Ignoring invalid highlight input %r", fragments)
            return False
        self._highlighted = valid
        self._notify()
        return True

    def sync_outlets(self) -> None:
        """Drop state for outlets no longer in the store.

        Called after the outlet set is replaced. A hovered outlet that left
        the set clears the hover and the border set; stale icon sizes and
        running animations are discarded.
        """
        changed = False
        if self._hovered is not None and self._hovered not in self._store:
            self._hovered = None
            self._border = frozenset()
            changed = True
        else:
            border = frozenset(outlet_id for outlet_id in self._border if outlet_id in self._store)
            if border != self._border:
                self._border = border
                changed = True
        for outlet_id in self._animator.sizes:
            if outlet_id not in self._store:
                self._animator.forget(outlet_id)
                changed = True
        if changed:
            self._notify()
