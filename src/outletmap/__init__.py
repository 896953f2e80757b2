"""outletmap - outlet map interaction engine with an assistant command channel."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("outletmap")
except PackageNotFoundError:
    __version__ = "0+local"
from outletmap.chat import ChatWidget
from outletmap.client import OutletMapClient
from outletmap.commands import CommandChannel, MapCommandChannel
from outletmap.config import MapConfig
from outletmap.exceptions import (
    OutletMapConfigError,
    OutletMapError,
    OutletMapPayloadError,
    OutletMapTransportError,
)
from outletmap.geometry import approx_distance_m, circles_overlap, overlaps_of
from outletmap.models import (
    AssistantReply,
    ChatMessage,
    IconSpec,
    MarkerView,
    Outlet,
    PopupContent,
    Sender,
)
from outletmap.state import (
    AnimationJob,
    AsyncioFrameScheduler,
    Direction,
    IconAnimator,
    ManualFrameScheduler,
    MarkerPhase,
    MarkerStateMachine,
)
from outletmap.store import OutletStore
from outletmap.surface import MapSurface

__all__ = [
    "__version__",
    "AnimationJob",
    "AssistantReply",
    "AsyncioFrameScheduler",
    "ChatMessage",
    "ChatWidget",
    "CommandChannel",
    "Direction",
    "IconAnimator",
    "IconSpec",
    "ManualFrameScheduler",
    "MapCommandChannel",
    "MapConfig",
    "MapSurface",
    "MarkerPhase",
    "MarkerStateMachine",
    "MarkerView",
    "Outlet",
    "OutletMapClient",
    "OutletMapConfigError",
    "OutletMapError",
    "OutletMapPayloadError",
    "OutletMapTransportError",
    "OutletStore",
    "PopupContent",
    "Sender",
    "approx_distance_m",
    "circles_overlap",
    "overlaps_of",
]
