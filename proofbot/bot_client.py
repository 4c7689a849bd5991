"""Abstract interface for the messaging-platform client."""
from abc import ABC, abstractmethod
from typing import Any

from proofbot.events import InboundEvent

# Platform acknowledgement for a sent reply, JSON-serialisable.
ReplyOutcome = dict[str, Any]


class MessagingClient(ABC):
    @abstractmethod
    def parse_events(self, body: str, signature: str) -> list[InboundEvent]:
        """Verify the webhook signature and return the batch. Raises on a bad signature."""
        ...

    @abstractmethod
    async def reply_text(self, reply_token: str, text: str) -> ReplyOutcome: ...

    @abstractmethod
    async def fetch_content(self, message_id: str) -> bytes: ...
