"""Per-frame callback scheduling.

A scheduler runs each requested callback exactly once, on a later frame.
Callbacks re-request themselves to keep an animation going.
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from collections.abc import Callable
from typing import Protocol

from outletmap._constants import FRAME_INTERVAL

_logger = logging.getLogger(__name__)

FrameCallback = Callable[[], None]


class FrameScheduler(Protocol):
    def request_frame(self, callback: FrameCallback) -> None:
        ...


class AsyncioFrameScheduler:
    """Run frame callbacks on the asyncio loop every *frame_interval* seconds."""

    def __init__(
        self,
        *,
        frame_interval: float = FRAME_INTERVAL,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._frame_interval = frame_interval
        self._loop = loop
        self._handles: set[asyncio.TimerHandle] = set()

    @property
    def pending(self) -> int:
        return len(self._handles)

    def request_frame(self, callback: FrameCallback) -> None:
        loop = self._loop or asyncio.get_running_loop()
        handle: asyncio.TimerHandle | None = None

        def _run() -> None:
            if handle is not None:
                self._handles.discard(handle)
            callback()

        handle = loop.call_later(self._frame_interval, _run)
        self._handles.add(handle)

    def cancel_all(self) -> None:
        """Drop every frame that has not run yet."""
        for handle in self._handles:
            handle.cancel()
        self._handles.clear()

    async def wait_idle(self, *, timeout: float | None = None) -> None:
        """Wait until no frame callbacks are pending."""

        async def _drain() -> None:
            while self._handles:
                await asyncio.sleep(self._frame_interval)

        await asyncio.wait_for(_drain(), timeout)


class ManualFrameScheduler:
    """Frame scheduler advanced explicitly by the caller.

    Useful for headless drivers and deterministic tests::

        scheduler = ManualFrameScheduler()
        animator = IconAnimator(scheduler)
        animator.start(1, Direction.GROW)
        scheduler.run_until_idle()
    """

    def __init__(self) -> None:
        self._queue: deque[FrameCallback] = deque()
        self.frames = 0

    @property
    def pending(self) -> int:
        return len(self._queue)

    def request_frame(self, callback: FrameCallback) -> None:
        self._queue.append(callback)

    def step(self) -> int:
        """Run one frame: every callback queued before this call.

        Callbacks requested while the frame runs wait for the next one.
        Returns the number of callbacks run.
        """
        batch = len(self._queue)
        for _ in range(batch):
            self._queue.popleft()()
        if batch:
            self.frames += 1
        return batch

    def run_until_idle(self, max_frames: int = 10_000) -> int:
        """Step until the queue is empty. Returns the number of frames run."""
        ran = 0
        while self._queue:
            if ran >= max_frames:
                raise RuntimeError(f"frame queue still busy after {max_frames} frames")
            self.step()
            ran += 1
        return ran
