"""Slack incoming-webhook transport."""

from collections.abc import Iterable
from typing import Any

import httpx
import structlog

from ...domain.entities import Message
from ...domain.exceptions import TransportError
from ...domain.ports import MessageTransport
from ..logging import Timer, mask_webhook_url

logger = structlog.get_logger()


class WebhookTransport(MessageTransport):
    """Posts messages to a Slack incoming webhook as JSON."""

    def __init__(
        self,
        webhook_url: str,
        *,
        timeout: float = 10.0,
        link_names: bool = False,
        unfurl_links: bool = False,
        unfurl_media: bool = True,
        allow_markdown: bool = True,
        markdown_in_attachments: Iterable[str] = (),
        client: httpx.Client | None = None,
    ) -> None:
        if not webhook_url or not webhook_url.strip():
            raise TransportError("Slack webhook URL must not be empty")
        self._url = webhook_url
        self._link_names = link_names
        self._unfurl_links = unfurl_links
        self._unfurl_media = unfurl_media
        self._allow_markdown = allow_markdown
        self._markdown_in_attachments = list(markdown_in_attachments)
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    def build_payload(self, message: Message) -> dict[str, Any]:
        """Combine the message fields with this webhook's formatting options."""
        payload = message.to_payload()
        payload["link_names"] = 1 if self._link_names else 0
        payload["unfurl_links"] = self._unfurl_links
        payload["unfurl_media"] = self._unfurl_media
        payload["mrkdwn"] = self._allow_markdown

        if self._markdown_in_attachments:
            for attachment in payload.get("attachments", []):
                attachment.setdefault("mrkdwn_in", list(self._markdown_in_attachments))

        return payload

    def dispatch(self, message: Message) -> None:
        """POST the message; raise TransportError on any failure."""
        payload = self.build_payload(message)
        webhook = mask_webhook_url(self._url)

        try:
            with Timer() as t:
                response = self._client.post(self._url, json=payload)
                response.raise_for_status()

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            error_msg = f"Slack webhook rejected message: {status_code}"
            logger.error(
                "Slack delivery failed",
                error=error_msg,
                body=e.response.text[:200],
                webhook=webhook,
            )
            raise TransportError(error_msg, status_code=status_code) from e

        except httpx.HTTPError as e:
            logger.error("Slack delivery failed", error=str(e), webhook=webhook)
            raise TransportError(f"Failed to contact Slack webhook: {e}") from e

        logger.info(
            "Slack message sent",
            channel=message.channel,
            attachments=len(message.attachments),
            duration_ms=t.duration_ms,
            webhook=webhook,
        )

    def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "WebhookTransport":
        return self

    def __exit__(self, *args) -> None:
        self.close()
