"""Marker visual state.

This package is the single owner of hover, border, highlight and icon-size
state. Everything else reads it, and mutates it only through
:class:`~outletmap.state.markers.MarkerStateMachine`.
"""

from outletmap.state.animation import AnimationJob, Direction, IconAnimator
from outletmap.state.markers import MarkerPhase, MarkerStateMachine
from outletmap.state.scheduler import AsyncioFrameScheduler, FrameScheduler, ManualFrameScheduler

__all__ = [
    "AnimationJob",
    "AsyncioFrameScheduler",
    "Direction",
    "FrameScheduler",
    "IconAnimator",
    "ManualFrameScheduler",
    "MarkerPhase",
    "MarkerStateMachine",
]
