"""
Outbound port for message delivery.

The message builder hands itself to this interface on send.
Infrastructure adapters implement it.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..entities.message import Message


class MessageTransport(ABC):
    """
    Outbound port for delivering a composed message.

    Implementations own serialization and the network call. Failures are
    raised to the caller of ``Message.send``; nothing is retried here.
    """

    @abstractmethod
    def dispatch(self, message: "Message") -> None:
        """
        Deliver a message.

        Args:
            message: The composed message; treated as read-only

        Raises:
            TransportError: If delivery fails
        """
        ...

    def close(self) -> None:
        """Release any resources held by the transport."""
