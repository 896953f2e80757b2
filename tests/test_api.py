from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from outletmap._api.assistant import build_chat_fields, send_chat
from outletmap._api.outlets import fetch_outlets, parse_outlets
from outletmap.config import MapConfig
from outletmap.exceptions import OutletMapPayloadError


class _FakeTransport:
    def __init__(self, payload: Any) -> None:
        self.payload = payload
        self.calls: list[tuple[str, str, dict[str, str] | None]] = []

    async def get_json(self, url: str) -> Any:
        self.calls.append(("GET", url, None))
        return self.payload

    async def post_form(self, url: str, fields: Mapping[str, str]) -> Any:
        self.calls.append(("POST", url, dict(fields)))
        return self.payload


RAW_OUTLETS = [
    {"id": 1, "name": "A", "address": "a", "lat": 3.10, "lng": 101.60, "radius": 500, "waze_url": "w1"},
    {"id": 2, "name": "B", "address": "b", "lat": 3.1005, "lng": 101.60, "radius": 400, "waze_url": "w2"},
]


@pytest.mark.asyncio
async def test_fetch_outlets_keeps_order() -> None:
    config = MapConfig(outlets_url="http://test/fetchOutlet")
    transport = _FakeTransport(RAW_OUTLETS)

    outlets = await fetch_outlets(config, transport)

    assert [o.id for o in outlets] == [1, 2]
    assert transport.calls == [("GET", "http://test/fetchOutlet", None)]


def test_parse_outlets_rejects_non_list() -> None:
    with pytest.raises(OutletMapPayloadError):
        parse_outlets({"outlets": RAW_OUTLETS})


def test_parse_outlets_rejects_malformed_record() -> None:
    with pytest.raises(OutletMapPayloadError):
        parse_outlets([{"id": 1, "name": "A"}])


def test_chat_fields_omit_session_until_known() -> None:
    assert build_chat_fields("hello", None) == {"message": "hello"}
    assert build_chat_fields("hello", "") == {"message": "hello"}
    assert build_chat_fields("hello", "s-1") == {"message": "hello", "session_id": "s-1"}


@pytest.mark.asyncio
async def test_send_chat_posts_form_and_parses_reply() -> None:
    config = MapConfig(chatbot_url="http://test/chatbot")
    transport = _FakeTransport({"reply": "Found it", "session_id": "s-1", "outlet": ["Cheras"]})

    reply = await send_chat(config, transport, "cheras?", "s-0")

    assert reply.outlet == ["Cheras"]
    assert reply.session_id == "s-1"
    assert transport.calls == [("POST", "http://test/chatbot", {"message": "cheras?", "session_id": "s-0"})]


@pytest.mark.asyncio
async def test_send_chat_rejects_non_object() -> None:
    with pytest.raises(OutletMapPayloadError):
        await send_chat(MapConfig(), _FakeTransport(["not", "an", "object"]), "hi")
