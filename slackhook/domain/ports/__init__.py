from .transport import MessageTransport

__all__ = ["MessageTransport"]
