from collections.abc import Iterable, Mapping
from typing import Any

from ..exceptions import InvalidAttachmentInput
from ..ports import MessageTransport
from ..value_objects import Attachment, Icon, IconType


def coerce_attachment(attachment: Attachment | Mapping[str, Any]) -> Attachment:
    """Accept a built Attachment or build one from keyed fields."""
    match attachment:
        case Attachment():
            return attachment
        case Mapping():
            return Attachment.from_fields(attachment)
        case _:
            raise InvalidAttachmentInput(
                "Attachment must be an Attachment instance or a keyed mapping, "
                f"got {type(attachment).__name__}"
            )


class Message:
    """
    A single outbound notification, configured fluently and sent once.

    Setters return the message itself so calls can be chained:

        message.to("#ops").from_("deploy-bot").with_icon(":rocket:").send("Done")
    """

    def __init__(
        self,
        transport: MessageTransport,
        *,
        channel: str | None = None,
        username: str | None = None,
        icon: str | None = None,
    ) -> None:
        self._transport = transport
        self._text: str | None = None
        self._channel = channel
        self._username = username
        self._icon: Icon | None = None
        self._attachments: list[Attachment] = []
        self.set_icon(icon)

    @property
    def transport(self) -> MessageTransport:
        return self._transport

    @property
    def text(self) -> str | None:
        return self._text

    @property
    def channel(self) -> str | None:
        return self._channel

    @property
    def username(self) -> str | None:
        return self._username

    @property
    def icon(self) -> str | None:
        return self._icon.value if self._icon else None

    @property
    def icon_type(self) -> IconType | None:
        return self._icon.type if self._icon else None

    @property
    def attachments(self) -> tuple[Attachment, ...]:
        return tuple(self._attachments)

    def get_text(self) -> str | None:
        return self._text

    def set_text(self, text: str | None) -> "Message":
        self._text = text
        return self

    def get_channel(self) -> str | None:
        return self._channel

    def set_channel(self, channel: str | None) -> "Message":
        self._channel = channel
        return self

    def get_username(self) -> str | None:
        return self._username

    def set_username(self, username: str | None) -> "Message":
        self._username = username
        return self

    def get_icon(self) -> str | None:
        return self.icon

    def get_icon_type(self) -> IconType | None:
        return self.icon_type

    def set_icon(self, icon: str | None) -> "Message":
        """
        Set the icon as an emoji token (``:ghost:``) or an image URL.

        ``None`` or an empty string clears the icon and its type.
        """
        self._icon = Icon.parse(icon) if icon else None
        return self

    def from_(self, username: str | None) -> "Message":
        return self.set_username(username)

    def to(self, channel: str | None) -> "Message":
        return self.set_channel(channel)

    def with_icon(self, icon: str | None) -> "Message":
        return self.set_icon(icon)

    def attach(self, attachment: Attachment | Mapping[str, Any]) -> "Message":
        """
        Append an attachment.

        Args:
            attachment: An Attachment, or a mapping of attachment fields

        Raises:
            InvalidAttachmentInput: If the value is neither
            AttachmentConstructionError: If the mapping does not validate
        """
        self._attachments.append(coerce_attachment(attachment))
        return self

    def get_attachments(self) -> list[Attachment]:
        """Return a copy of the attachments in display order."""
        return list(self._attachments)

    def set_attachments(
        self, attachments: Iterable[Attachment | Mapping[str, Any]]
    ) -> "Message":
        """
        Replace all attachments.

        Every item is validated before anything changes, so a bad item
        leaves the current attachments in place.
        """
        coerced = [coerce_attachment(attachment) for attachment in attachments]
        self._attachments = coerced
        return self

    def clear_attachments(self) -> "Message":
        self._attachments = []
        return self

    def send(self, text: str | None = None) -> None:
        """
        Hand the message to the transport.

        Args:
            text: Optional text that replaces the current text before sending

        Raises:
            TransportError: Propagated unchanged from the transport
        """
        if text:
            self.set_text(text)

        self._transport.dispatch(self)

    def to_payload(self) -> dict[str, Any]:
        """Serialize the message's own fields to the webhook shape."""
        payload: dict[str, Any] = {}
        if self._text is not None:
            payload["text"] = self._text
        if self._channel is not None:
            payload["channel"] = self._channel
        if self._username is not None:
            payload["username"] = self._username
        if self._icon is not None:
            payload.update(self._icon.to_payload())
        if self._attachments:
            payload["attachments"] = [a.to_payload() for a in self._attachments]
        return payload

    def __repr__(self) -> str:
        return (
            f"Message(text={self._text!r}, channel={self._channel!r}, "
            f"username={self._username!r}, icon={self.icon!r}, "
            f"attachments={len(self._attachments)})"
        )
