from .message import Message, coerce_attachment

__all__ = ["Message", "coerce_attachment"]
