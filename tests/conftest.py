from unittest.mock import MagicMock

import pytest

from slackhook import Attachment, Message, MessageTransport


@pytest.fixture
def transport() -> MagicMock:
    return MagicMock(spec=MessageTransport)


@pytest.fixture
def message(transport) -> Message:
    return Message(transport)


@pytest.fixture
def alert_attachment() -> Attachment:
    return Attachment(color="#ff0000", text="alert")


@pytest.fixture
def info_attachment() -> Attachment:
    return Attachment(color="#439fe0", text="info", title="Heads up")
