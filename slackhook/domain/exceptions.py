"""Errors raised by message construction and delivery."""


class SlackError(Exception):
    """Base class for all slackhook errors."""


class InvalidAttachmentInput(SlackError, TypeError):
    """Raised when an attachment is neither an Attachment nor a mapping."""


class AttachmentConstructionError(SlackError, ValueError):
    """Raised when attachment fields cannot be coerced into an Attachment."""


class TransportError(SlackError):
    """Raised when a transport fails to deliver a message."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
