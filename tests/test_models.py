"""Tests for pydantic model parsing."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from outletmap.models.assistant import AssistantReply
from outletmap.models.outlet import Outlet
from outletmap.models.transcript import ChatMessage, Sender


class TestOutlet:
    SAMPLE_PAYLOAD: dict = {
        "id": 17,
        "name": "McDonald's SS2 DT",
        "address": "No. 1, Jalan SS2/61, Petaling Jaya",
        "lat": 3.1180,
        "lng": 101.6220,
        "radius": 5000,
        "waze_url": "https://waze.com/ul?ll=3.118,101.622",
        "opening_hours": "24h",
    }

    def test_basic_parsing(self) -> None:
        outlet = Outlet.model_validate(self.SAMPLE_PAYLOAD)

        assert outlet.id == 17
        assert outlet.name == "McDonald's SS2 DT"
        assert outlet.position == (3.1180, 101.6220)
        assert outlet.radius == 5000.0
        assert outlet.external_link_url == "https://waze.com/ul?ll=3.118,101.622"

    def test_numeric_strings_coerced(self) -> None:
        outlet = Outlet.model_validate({**self.SAMPLE_PAYLOAD, "lat": "3.5", "radius": "250"})

        assert outlet.lat == 3.5
        assert outlet.radius == 250.0

    def test_null_address_and_link_default_to_empty(self) -> None:
        outlet = Outlet.model_validate({**self.SAMPLE_PAYLOAD, "address": None, "waze_url": None})

        assert outlet.address == ""
        assert outlet.external_link_url == ""

    def test_negative_radius_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Outlet.model_validate({**self.SAMPLE_PAYLOAD, "radius": -1})

    def test_missing_coordinates_rejected(self) -> None:
        payload = dict(self.SAMPLE_PAYLOAD)
        del payload["lat"]
        with pytest.raises(ValidationError):
            Outlet.model_validate(payload)

    def test_frozen(self) -> None:
        outlet = Outlet.model_validate(self.SAMPLE_PAYLOAD)
        with pytest.raises(ValidationError):
            outlet.name = "other"  # type: ignore[misc]


class TestAssistantReply:
    def test_outlet_list(self) -> None:
        reply = AssistantReply.from_payload({"reply": "Found it", "session_id": "abc", "outlet": ["Cheras"]})

        assert reply.reply == "Found it"
        assert reply.session_id == "abc"
        assert reply.outlet == ["Cheras"]
        assert reply.raw["reply"] == "Found it"

    def test_null_and_empty_outlet_stay_distinct(self) -> None:
        assert AssistantReply.from_payload({"reply": "hi", "outlet": None}).outlet is None
        assert AssistantReply.from_payload({"reply": "hi"}).outlet is None
        assert AssistantReply.from_payload({"reply": "hi", "outlet": []}).outlet == []

    def test_non_string_outlet_items_mean_no_action(self) -> None:
        assert AssistantReply.from_payload({"reply": "x", "outlet": [1, 2]}).outlet is None
        assert AssistantReply.from_payload({"outlet": ["SS2", 3, None]}).outlet is None

    def test_unexpected_outlet_shape_is_no_action(self) -> None:
        assert AssistantReply.from_payload({"outlet": {"name": "SS2"}}).outlet is None

    def test_empty_session_id_normalised(self) -> None:
        assert AssistantReply.from_payload({"reply": "hi", "session_id": ""}).session_id is None


def test_chat_message_factories() -> None:
    bot = ChatMessage.bot("hello", outlets=["Cheras"])
    user = ChatMessage.user("hi")

    assert bot.sender is Sender.BOT
    assert bot.outlets == ("Cheras",)
    assert user.sender is Sender.USER
    assert user.outlets == ()
