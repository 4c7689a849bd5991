from dataclasses import dataclass
from typing import Optional, Union

from proofbot.constants import EVENT_TYPE_MESSAGE, MESSAGE_TYPE_IMAGE, MESSAGE_TYPE_TEXT


@dataclass(frozen=True)
class InboundEvent:
    type: str
    reply_token: Optional[str] = None
    message_type: Optional[str] = None
    message_id: Optional[str] = None
    text: Optional[str] = None


@dataclass(frozen=True)
class Echo:
    reply_token: str
    text: str


@dataclass(frozen=True)
class AnalyzeImage:
    reply_token: str
    message_id: str


@dataclass(frozen=True)
class Ignore:
    reason: Optional[str] = None


EventAction = Union[Echo, AnalyzeImage, Ignore]


def classify(event: InboundEvent) -> EventAction:
    """Resolve an inbound event to exactly one action."""
    match (event.type, event.message_type):
        case (t, _) if t != EVENT_TYPE_MESSAGE:
            return Ignore(reason=f"event type {t}")
        case (_, mt) if mt == MESSAGE_TYPE_TEXT:
            return Echo(reply_token=event.reply_token, text=event.text or "")
        case (_, mt) if mt == MESSAGE_TYPE_IMAGE:
            return AnalyzeImage(reply_token=event.reply_token, message_id=event.message_id)
        case (_, mt):
            return Ignore(reason=f"message type {mt}")
