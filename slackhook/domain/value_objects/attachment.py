"""Attachment value objects.

Attachments are validated with pydantic so that raw keyed input coming from
callers is rejected early, before it ever reaches a message.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from ..exceptions import AttachmentConstructionError


class AttachmentField(BaseModel):
    """A title/value pair rendered as a table cell inside an attachment."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    title: str
    value: str
    short: bool = False

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump()


class Attachment(BaseModel):
    """Rich content block displayed below the message text."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    fallback: str | None = None
    text: str | None = None
    pretext: str | None = None
    color: str | None = None
    author_name: str | None = None
    author_link: str | None = None
    author_icon: str | None = None
    title: str | None = None
    title_link: str | None = None
    image_url: str | None = None
    thumb_url: str | None = None
    footer: str | None = None
    footer_icon: str | None = None
    timestamp: int | None = None
    fields: tuple[AttachmentField, ...] = ()
    mrkdwn_in: tuple[str, ...] = ()

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> "Attachment":
        """
        Build an attachment from a keyed mapping.

        Args:
            fields: Attachment keys as Slack names them (``color``, ``text``, ...)

        Returns:
            Validated Attachment

        Raises:
            AttachmentConstructionError: If a key is unknown or a value is malformed
        """
        try:
            return cls.model_validate(dict(fields))
        except ValidationError as e:
            raise AttachmentConstructionError(f"Invalid attachment fields: {e}") from e

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the webhook shape, dropping unset keys."""
        payload = self.model_dump(exclude_none=True, exclude={"fields", "mrkdwn_in"})
        if self.fields:
            payload["fields"] = [field.to_payload() for field in self.fields]
        if self.mrkdwn_in:
            payload["mrkdwn_in"] = list(self.mrkdwn_in)
        return payload
