"""LineClient — LINE Messaging API transport via line-bot-sdk and httpx."""
import logging
from typing import Any, Optional

import httpx
from linebot.v3 import WebhookParser
from linebot.v3.messaging import (
    AsyncApiClient,
    AsyncMessagingApi,
    Configuration,
    ReplyMessageRequest,
    TextMessage,
)

from proofbot.bot_client import MessagingClient, ReplyOutcome
from proofbot.config import Config
from proofbot.constants import LINE_CONTENT_URL, MSG_FETCHED_CONTENT
from proofbot.events import InboundEvent
from proofbot.line.content import accumulate

logger = logging.getLogger(__name__)


class LineClient(MessagingClient):

    def __init__(
        self,
        config: Config,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._access_token = config.channel_access_token
        self._parser = WebhookParser(config.channel_secret)
        self._configuration = Configuration(access_token=config.channel_access_token)
        self._transport = transport

    # ── MessagingClient interface ─────────────────────────────────────────────

    def parse_events(self, body: str, signature: str) -> list[InboundEvent]:
        return list(map(self._to_inbound, self._parser.parse(body, signature)))

    async def reply_text(self, reply_token: str, text: str) -> ReplyOutcome:
        async with AsyncApiClient(self._configuration) as api_client:
            api = AsyncMessagingApi(api_client)
            response = await api.reply_message(
                ReplyMessageRequest(
                    reply_token=reply_token,
                    messages=[TextMessage(text=text)],
                )
            )
        return response.to_dict()

    async def fetch_content(self, message_id: str) -> bytes:
        url = LINE_CONTENT_URL % message_id
        headers = {"Authorization": f"Bearer {self._access_token}"}
        async with httpx.AsyncClient(transport=self._transport) as client:
            async with client.stream("GET", url, headers=headers) as response:
                response.raise_for_status()
                content = await accumulate(response.aiter_bytes())
        logger.debug(MSG_FETCHED_CONTENT, len(content), message_id)
        return content

    # ── helpers (also used in tests) ─────────────────────────────────────────

    @staticmethod
    def _to_inbound(event: Any) -> InboundEvent:
        """Flatten a parsed SDK webhook event into an InboundEvent."""
        message = getattr(event, "message", None)
        return InboundEvent(
            type=event.type,
            reply_token=getattr(event, "reply_token", None),
            message_type=getattr(message, "type", None),
            message_id=getattr(message, "id", None),
            text=getattr(message, "text", None),
        )
