"""Icon size animation.

Each outlet has at most one live animation job. Starting a job bumps the
outlet's generation; ticks carrying an older generation are dropped, so a
new direction supersedes whatever was in flight and continues from the
current size.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from enum import StrEnum

from outletmap._constants import MAX_ICON_SIZE, MIN_ICON_SIZE
from outletmap.state.scheduler import FrameScheduler

_logger = logging.getLogger(__name__)

OutletId = int | str


class Direction(StrEnum):
    GROW = "grow"
    SHRINK = "shrink"


@dataclasses.dataclass(frozen=True, slots=True)
class AnimationJob:
    outlet_id: OutletId
    direction: Direction
    generation: int


class IconAnimator:
    """Owns the outlet id -> icon size map and the animation loops driving it."""

    def __init__(
        self,
        scheduler: FrameScheduler,
        *,
        min_size: int = MIN_ICON_SIZE,
        max_size: int = MAX_ICON_SIZE,
        on_change: Callable[[OutletId, int], None] | None = None,
    ) -> None:
        if min_size > max_size:
            raise ValueError(f"min_size ({min_size}) must not exceed max_size ({max_size})")
        self._scheduler = scheduler
        self.min_size = min_size
        self.max_size = max_size
        self.on_change = on_change
        self._sizes: dict[OutletId, int] = {}
        self._generations: dict[OutletId, int] = {}
        self._active: dict[OutletId, AnimationJob] = {}

    @property
    def sizes(self) -> dict[OutletId, int]:
        """Snapshot of the tracked sizes."""
        return dict(self._sizes)

    def size_of(self, outlet_id: OutletId) -> int:
        return self._sizes.get(outlet_id, self.min_size)

    def active_job(self, outlet_id: OutletId) -> AnimationJob | None:
        return self._active.get(outlet_id)

    def is_animating(self, outlet_id: OutletId) -> bool:
        return outlet_id in self._active

    def target_for(self, direction: Direction) -> int:
        return self.max_size if direction is Direction.GROW else self.min_size

    def start(self, outlet_id: OutletId, direction: Direction) -> AnimationJob:
        """Start animating *outlet_id* in *direction*, superseding any running job.

        The first step runs immediately; the rest run one per frame.
        """
        generation = self._generations.get(outlet_id, 0) + 1
        self._generations[outlet_id] = generation
        job = AnimationJob(outlet_id=outlet_id, direction=direction, generation=generation)
        superseded = self._active.get(outlet_id)
        if superseded is not None and superseded.direction is not direction:
            _logger.debug("Animation for %r reversed to %s", outlet_id, direction)
        self._active[outlet_id] = job
        self._tick(job)
        return job

    def forget(self, outlet_id: OutletId) -> None:
        """Drop the tracked size of *outlet_id* and invalidate any running job."""
        self._generations[outlet_id] = self._generations.get(outlet_id, 0) + 1
        self._active.pop(outlet_id, None)
        self._sizes.pop(outlet_id, None)

    def _tick(self, job: AnimationJob) -> None:
        if self._generations.get(job.outlet_id) != job.generation:
            return

        current = self.size_of(job.outlet_id)
        target = self.target_for(job.direction)
        if job.direction is Direction.GROW:
            size = min(current + 1, target)
        else:
            size = max(current - 1, target)

        changed = self._sizes.get(job.outlet_id) != size
        self._sizes[job.outlet_id] = size
        if changed and self.on_change is not None:
            self.on_change(job.outlet_id, size)

        if size == target:
            self._active.pop(job.outlet_id, None)
            return
        self._scheduler.request_frame(lambda: self._tick(job))
