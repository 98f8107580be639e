from .webhook_transport import WebhookTransport

__all__ = ["WebhookTransport"]
