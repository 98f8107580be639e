from .entities import Message
from .exceptions import (
    AttachmentConstructionError,
    InvalidAttachmentInput,
    SlackError,
    TransportError,
)
from .ports import MessageTransport
from .value_objects import Attachment, AttachmentField, Icon, IconType

__all__ = [
    "Attachment",
    "AttachmentConstructionError",
    "AttachmentField",
    "Icon",
    "IconType",
    "InvalidAttachmentInput",
    "Message",
    "MessageTransport",
    "SlackError",
    "TransportError",
]
