from .attachment import Attachment, AttachmentField
from .icon import Icon, IconType

__all__ = ["Attachment", "AttachmentField", "Icon", "IconType"]
