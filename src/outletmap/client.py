"""High-level async client wiring the map and the assistant together."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import aiohttp

from outletmap._api.assistant import send_chat
from outletmap._api.outlets import fetch_outlets
from outletmap._transport import HttpTransport, Transport
from outletmap.chat import ChatWidget
from outletmap.commands import MapCommandChannel
from outletmap.config import MapConfig
from outletmap.exceptions import OutletMapError
from outletmap.models.assistant import AssistantReply
from outletmap.models.outlet import Outlet
from outletmap.state.animation import IconAnimator
from outletmap.state.markers import MarkerStateMachine
from outletmap.state.scheduler import AsyncioFrameScheduler, FrameScheduler
from outletmap.store import OutletStore
from outletmap.surface import MapSurface

_logger = logging.getLogger(__name__)


class OutletMapClient:
    """Async entry point assembling store, marker state, surface and chat.

    Usage::

        async with OutletMapClient(MapConfig.from_env()) as client:
            await client.load()
            await client.chat.send("Which outlets are in Cheras?")
            views = client.surface.markers()
    """

    def __init__(
        self,
        config: MapConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
        scheduler: FrameScheduler | None = None,
        on_render: Callable[[], None] | None = None,
    ) -> None:
        self._config = config or MapConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport = transport
        self.scheduler: FrameScheduler = scheduler or AsyncioFrameScheduler(
            frame_interval=self._config.frame_interval,
        )
        self.store = OutletStore(self._fetch_outlets)
        self.animator = IconAnimator(
            self.scheduler,
            min_size=self._config.min_icon_size,
            max_size=self._config.max_icon_size,
        )
        self.markers = MarkerStateMachine(
            self.store,
            self.animator,
            force_colorful=self._config.force_colorful,
        )
        self.surface = MapSurface(self._config, self.store, self.markers, on_render=on_render)
        self.commands = MapCommandChannel(self.markers, self.store, self.surface.focus)
        self.chat = ChatWidget(self.commands, self._ask_assistant)

    @property
    def config(self) -> MapConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> OutletMapClient:
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._http_session, timeout=self._config.request_timeout)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if isinstance(self.scheduler, AsyncioFrameScheduler):
            self.scheduler.cancel_all()
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
            self._transport = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise OutletMapError("Client not initialized. Use 'async with OutletMapClient(...) as client:'")
        return self._transport

    async def _fetch_outlets(self) -> list[Outlet]:
        return await fetch_outlets(self._config, self._require_transport())

    async def _ask_assistant(self, message: str, session_id: str | None) -> AssistantReply:
        return await send_chat(self._config, self._require_transport(), message, session_id)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def load(self) -> tuple[Outlet, ...]:
        """Load the outlet set and mount a marker for each outlet.

        Marker state held for outlets that are not in the new set is dropped.
        """
        outlets = await self.store.load()
        self.markers.sync_outlets()
        self.surface.mount_all()
        _logger.debug("Map ready with %d outlets", len(outlets))
        return outlets
