"""Command channel between the conversational component and the map.

The chat side only ever sees :class:`CommandChannel`; the map side
provides :class:`MapCommandChannel`. Neither reaches into the other's state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Protocol

from outletmap.models.outlet import Outlet
from outletmap.state.markers import MarkerStateMachine
from outletmap.store import OutletStore

_logger = logging.getLogger(__name__)

FocusAction = Callable[[Outlet], bool]


class CommandChannel(Protocol):
    def highlight_outlets_by_name(self, names: Sequence[str] | None = None) -> None:
        ...

    def open_outlet_popup(self, name_fragment: str) -> None:
        ...


class MapCommandChannel:
    """Command channel backed by the marker state machine and a focus action.

    Both commands are silent no-ops on bad input; nothing is raised to
    the caller.
    """

    def __init__(
        self,
        state: MarkerStateMachine,
        store: OutletStore,
        focus: FocusAction,
    ) -> None:
        self._state = state
        self._store = store
        self._focus = focus

    def highlight_outlets_by_name(self, names: Sequence[str] | None = None) -> None:
        """Highlight outlets whose name contains any of *names*.

        Pass ``[]`` to clear; omitting the argument changes nothing.
        """
        self._state.set_highlighted_names(names)

    def open_outlet_popup(self, name_fragment: str) -> None:
        """Open the callout of the first outlet matching *name_fragment* and centre on it."""
        if not isinstance(name_fragment, str):
            _logger.debug("Ignoring non-string popup request %r", name_fragment)
            return
        outlet = self._store.find_by_name(name_fragment)
        if outlet is None:
            _logger.debug("No outlet matches %r", name_fragment)
            return
        if not self._focus(outlet):
            _logger.debug("Marker for %r not ready, dropping focus request", outlet.id)
