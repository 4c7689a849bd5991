"""ClaudeVisionClient — Anthropic Claude vision backend."""
import base64

from anthropic import AsyncAnthropic

from proofbot.constants import (
    CLAUDE_MAX_TOKENS,
    CLAUDE_VISION_MODEL,
    IMAGE_MIME_TYPE,
    MSG_EMPTY_ANALYSIS,
)
from proofbot.vision.client import VisionClient


class ClaudeVisionClient(VisionClient):

    def __init__(self, api_key: str) -> None:
        self._client = AsyncAnthropic(api_key=api_key)

    async def analyze(self, image_bytes: bytes, prompt: str) -> str:
        image_data = base64.standard_b64encode(image_bytes).decode()
        message = await self._client.messages.create(
            model=CLAUDE_VISION_MODEL,
            max_tokens=CLAUDE_MAX_TOKENS,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": prompt},
                        {
                            "type": "image",
                            "source": {
                                "type": "base64",
                                "media_type": IMAGE_MIME_TYPE,
                                "data": image_data,
                            },
                        },
                    ],
                }
            ],
        )
        match message.content:
            case [first, *_] if getattr(first, "text", ""):
                return first.text
            case _:
                raise ValueError(MSG_EMPTY_ANALYSIS)
