"""Outlet store: the ordered outlet arena plus an id index."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable, Iterator

from outletmap.exceptions import OutletMapError
from outletmap.models.outlet import Outlet

_logger = logging.getLogger(__name__)

OutletFetcher = Callable[[], Awaitable[list[Outlet]]]


class OutletStore:
    """Holds the outlets of the most recent successful fetch.

    The set is replaced wholesale; there are no incremental updates.
    All id and name lookups resolve against the stored arena.
    """

    def __init__(self, fetcher: OutletFetcher | None = None) -> None:
        self._fetcher = fetcher
        self._outlets: tuple[Outlet, ...] = ()
        self._index: dict[int | str, int] = {}

    async def load(self) -> tuple[Outlet, ...]:
        """Fetch the outlet set once.

        Any failure is logged and yields an empty set; an empty map is a
        valid state.
        """
        if self._fetcher is None:
            _logger.debug("No outlet fetcher configured")
            return self._outlets
        try:
            outlets = await self._fetcher()
            self.replace(outlets)
        except (OutletMapError, ValueError):
            _logger.error("Problem loading outlets", exc_info=True)
            self.replace(())
        return self._outlets

    def replace(self, outlets: Iterable[Outlet]) -> None:
        """Replace the stored set. Duplicate ids raise ``ValueError``."""
        arena = tuple(outlets)
        index: dict[int | str, int] = {}
        for position, outlet in enumerate(arena):
            if outlet.id in index:
                raise ValueError(f"duplicate outlet id {outlet.id!r}")
            index[outlet.id] = position
        self._outlets = arena
        self._index = index

    @property
    def outlets(self) -> tuple[Outlet, ...]:
        return self._outlets

    def get(self, outlet_id: int | str) -> Outlet | None:
        position = self._index.get(outlet_id)
        if position is None:
            return None
        return self._outlets[position]

    def find_by_name(self, fragment: str) -> Outlet | None:
        """First outlet, in fetch order, whose name contains *fragment*."""
        for outlet in self._outlets:
            if fragment in outlet.name:
                return outlet
        return None

    def __contains__(self, outlet_id: object) -> bool:
        return outlet_id in self._index

    def __iter__(self) -> Iterator[Outlet]:
        return iter(self._outlets)

    def __len__(self) -> int:
        return len(self._outlets)
