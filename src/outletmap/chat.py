"""Conversational widget state.

The widget keeps the transcript, the loading flag and the assistant
session id. It drives the map only through a :class:`CommandChannel`.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from outletmap._constants import CONNECTION_ERROR_MESSAGE, GREETING_MESSAGES, NO_MATCH_MESSAGE
from outletmap.commands import CommandChannel
from outletmap.exceptions import OutletMapError
from outletmap.models.assistant import AssistantReply
from outletmap.models.transcript import ChatMessage

_logger = logging.getLogger(__name__)

Assistant = Callable[[str, str | None], Awaitable[AssistantReply]]


class ChatWidget:
    """Transcript and send loop for the assistant.

    Usage::

        widget = ChatWidget(channel, assistant)
        await widget.send("Any outlet in SS2?")
        widget.click_outlet("McDonald's SS2 DT")
    """

    def __init__(self, commands: CommandChannel, assistant: Assistant) -> None:
        self._commands = commands
        self._assistant = assistant
        self.messages: list[ChatMessage] = [ChatMessage.bot(text) for text in GREETING_MESSAGES]
        self.session_id: str | None = None
        self.is_loading = False

    async def send(self, text: str) -> ChatMessage | None:
        """Send one user message and append the assistant's answer.

        Blank input is ignored. Returns the bot message appended, or
        ``None`` when nothing was sent.
        """
        message = text.strip()
        if not message:
            return None

        self.messages.append(ChatMessage.user(message))
        self.is_loading = True
        try:
            reply = await self._assistant(message, self.session_id)
        except OutletMapError:
            _logger.error("Error calling assistant", exc_info=True)
            response = ChatMessage.bot(CONNECTION_ERROR_MESSAGE)
        else:
            if reply.session_id:
                self.session_id = reply.session_id
            response = self._apply_reply(reply)
        finally:
            self.is_loading = False

        self.messages.append(response)
        return response

    def _apply_reply(self, reply: AssistantReply) -> ChatMessage:
        if reply.outlet is None:
            return ChatMessage.bot(reply.reply)
        if not reply.outlet:
            self._commands.highlight_outlets_by_name([])
            return ChatMessage.bot(NO_MATCH_MESSAGE)
        self._commands.highlight_outlets_by_name(reply.outlet)
        return ChatMessage.bot(reply.reply, outlets=reply.outlet)

    def click_outlet(self, name: str) -> None:
        """Handle a click on an outlet button in the transcript."""
        self._commands.open_outlet_popup(name)
