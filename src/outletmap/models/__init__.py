"""Data models for outlets, assistant replies and map rendering."""

from outletmap.models.assistant import AssistantReply
from outletmap.models.marker import IconSpec, MarkerView, PopupContent
from outletmap.models.outlet import Outlet
from outletmap.models.transcript import ChatMessage, Sender

__all__ = [
    "AssistantReply",
    "ChatMessage",
    "IconSpec",
    "MarkerView",
    "Outlet",
    "PopupContent",
    "Sender",
]
