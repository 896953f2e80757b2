"""Assistant exchange models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from outletmap.models._base import safe_str, string_list


class AssistantReply(BaseModel):
    """One reply from the remote assistant.

    ``outlet`` carries the map action:

    * ``None`` - no map action
    * ``[]`` - explicitly clear highlighting
    * non-empty - outlet names to highlight and offer as buttons
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    reply: str = ""
    session_id: str | None = None
    outlet: list[str] | None = Field(default=None)
    raw: dict[str, Any] = Field(default_factory=dict)

    @field_validator("reply", mode="before")
    @classmethod
    def _coerce_reply(cls, value: Any) -> str:
        return safe_str(value) or ""

    @field_validator("session_id", mode="before")
    @classmethod
    def _coerce_session_id(cls, value: Any) -> str | None:
        return safe_str(value)

    @field_validator("outlet", mode="before")
    @classmethod
    def _coerce_outlet(cls, value: Any) -> list[str] | None:
        return string_list(value)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> AssistantReply:
        return cls.model_validate({**payload, "raw": payload})
