"""Assistant exchange endpoint.

Endpoint:
  - POST /chatbot (form fields ``message`` and, once known, ``session_id``)
"""

from __future__ import annotations

from pydantic import ValidationError

from outletmap._transport import Transport
from outletmap.config import MapConfig
from outletmap.exceptions import OutletMapPayloadError
from outletmap.models.assistant import AssistantReply


def build_chat_fields(message: str, session_id: str | None) -> dict[str, str]:
    """Build the form fields for one chat turn.

    The session identifier is omitted until the service has issued one.
    """
    fields = {"message": message}
    if session_id:
        fields["session_id"] = session_id
    return fields


async def send_chat(
    config: MapConfig,
    transport: Transport,
    message: str,
    session_id: str | None = None,
) -> AssistantReply:
    """Send one chat turn and parse the assistant's reply."""
    payload = await transport.post_form(config.chatbot_url, build_chat_fields(message, session_id))
    if not isinstance(payload, dict):
        raise OutletMapPayloadError(
            f"Expected a JSON object from assistant, got {type(payload).__name__}",
            url=config.chatbot_url,
        )
    try:
        return AssistantReply.from_payload(payload)
    except ValidationError as exc:
        raise OutletMapPayloadError(f"Malformed assistant reply: {exc}", url=config.chatbot_url) from exc
