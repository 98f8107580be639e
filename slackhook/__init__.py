"""Fluent builder for Slack incoming-webhook messages."""

from .client import MessageDefaults, SlackClient
from .domain import (
    Attachment,
    AttachmentConstructionError,
    AttachmentField,
    Icon,
    IconType,
    InvalidAttachmentInput,
    Message,
    MessageTransport,
    SlackError,
    TransportError,
)
from .infrastructure.adapters import WebhookTransport

__all__ = [
    "Attachment",
    "AttachmentConstructionError",
    "AttachmentField",
    "Icon",
    "IconType",
    "InvalidAttachmentInput",
    "Message",
    "MessageDefaults",
    "MessageTransport",
    "SlackClient",
    "SlackError",
    "TransportError",
    "WebhookTransport",
]
