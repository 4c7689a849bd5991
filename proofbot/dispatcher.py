"""EventDispatcher — routes one inbound event to echo, image analysis, or nothing."""
import logging
from typing import Optional

from proofbot.bot_client import MessagingClient, ReplyOutcome
from proofbot.constants import (
    ANALYSIS_PROMPT,
    MSG_IGNORED,
    MSG_IMAGE_ANALYSIS_ERROR,
    MSG_IMAGE_ANALYSIS_FAILED,
    MSG_ROUTE,
)
from proofbot.events import AnalyzeImage, Echo, Ignore, InboundEvent, classify
from proofbot.vision.client import VisionClient

logger = logging.getLogger(__name__)


def failure_detail(exc: Exception) -> str:
    """Short description of a failure, suitable for a chat reply."""
    return str(exc) or type(exc).__name__


class EventDispatcher:
    """Handles a single webhook event.

    Expected failures on the image path are turned into a chat reply; only
    faults from the messaging client itself (e.g. a failed reply send)
    propagate to the caller.
    """

    def __init__(
        self,
        messaging: MessagingClient,
        vision: VisionClient,
        prompt: str = ANALYSIS_PROMPT,
    ) -> None:
        self._messaging = messaging
        self._vision = vision
        self._prompt = prompt

    async def dispatch(self, event: InboundEvent) -> Optional[ReplyOutcome]:
        action = classify(event)
        logger.debug(MSG_ROUTE, event.type, type(action).__name__)
        match action:
            case Ignore(reason=reason):
                logger.debug(MSG_IGNORED, reason)
                return None
            case Echo(reply_token=token, text=text):
                return await self._messaging.reply_text(token, text)
            case AnalyzeImage() as image:
                return await self._analyze_image(image)

    async def _analyze_image(self, action: AnalyzeImage) -> ReplyOutcome:
        try:
            image_bytes = await self._messaging.fetch_content(action.message_id)
            reply = await self._vision.analyze(image_bytes, self._prompt)
        except Exception as exc:
            logger.exception(MSG_IMAGE_ANALYSIS_ERROR, action.message_id)
            reply = MSG_IMAGE_ANALYSIS_FAILED % failure_detail(exc)
        return await self._messaging.reply_text(action.reply_token, reply)
