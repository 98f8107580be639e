"""
Entry point for building messages with shared defaults.

The client binds a transport and the default sender identity, then hands
out fresh messages. It holds no per-message state.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .config import Settings
from .domain.entities import Message
from .domain.ports import MessageTransport
from .domain.value_objects import Attachment
from .infrastructure.adapters import WebhookTransport


@dataclass(frozen=True)
class MessageDefaults:
    """Values applied to every message the client creates."""

    channel: str | None = None
    username: str | None = None
    icon: str | None = None


class SlackClient:
    """Creates messages bound to one transport."""

    def __init__(
        self,
        transport: MessageTransport,
        defaults: MessageDefaults | None = None,
    ) -> None:
        self._transport = transport
        self._defaults = defaults or MessageDefaults()

    @classmethod
    def from_settings(cls, settings: Settings) -> "SlackClient":
        """Wire a webhook transport and defaults from configuration."""
        transport = WebhookTransport(
            settings.webhook_url,
            timeout=settings.timeout,
            link_names=settings.link_names,
            unfurl_links=settings.unfurl_links,
            unfurl_media=settings.unfurl_media,
            allow_markdown=settings.allow_markdown,
            markdown_in_attachments=settings.markdown_in_attachments,
        )
        defaults = MessageDefaults(
            channel=settings.channel,
            username=settings.username,
            icon=settings.icon,
        )
        return cls(transport, defaults)

    @property
    def transport(self) -> MessageTransport:
        return self._transport

    @property
    def defaults(self) -> MessageDefaults:
        return self._defaults

    def close(self) -> None:
        self._transport.close()

    def create_message(self) -> Message:
        return Message(
            self._transport,
            channel=self._defaults.channel,
            username=self._defaults.username,
            icon=self._defaults.icon,
        )

    def to(self, channel: str | None) -> Message:
        return self.create_message().to(channel)

    def from_(self, username: str | None) -> Message:
        return self.create_message().from_(username)

    def with_icon(self, icon: str | None) -> Message:
        return self.create_message().with_icon(icon)

    def attach(self, attachment: Attachment | Mapping[str, Any]) -> Message:
        return self.create_message().attach(attachment)

    def send(self, text: str) -> Message:
        """Send ``text`` with the default channel and identity."""
        message = self.create_message()
        message.send(text)
        return message
