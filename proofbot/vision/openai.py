"""OpenAIVisionClient — OpenAI GPT-4o vision backend."""
import base64

from openai import AsyncOpenAI

from proofbot.constants import IMAGE_MIME_TYPE, MSG_EMPTY_ANALYSIS, OPENAI_VISION_MODEL
from proofbot.vision.client import VisionClient


class OpenAIVisionClient(VisionClient):

    def __init__(self, api_key: str) -> None:
        self._client = AsyncOpenAI(api_key=api_key)

    async def analyze(self, image_bytes: bytes, prompt: str) -> str:
        image_data = base64.standard_b64encode(image_bytes).decode()
        response = await self._client.chat.completions.create(
            model=OPENAI_VISION_MODEL,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": prompt},
                        {
                            "type": "image_url",
                            "image_url": {"url": f"data:{IMAGE_MIME_TYPE};base64,{image_data}"},
                        },
                    ],
                }
            ],
        )
        content = response.choices[0].message.content
        if not content:
            raise ValueError(MSG_EMPTY_ANALYSIS)
        return content
