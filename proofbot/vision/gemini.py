"""GeminiVisionClient — Google Gemini vision backend."""
from google import genai
from google.genai import types

from proofbot.constants import GEMINI_VISION_MODEL, IMAGE_MIME_TYPE, MSG_EMPTY_ANALYSIS
from proofbot.vision.client import VisionClient


class GeminiVisionClient(VisionClient):

    def __init__(self, api_key: str, model: str = GEMINI_VISION_MODEL) -> None:
        self._client = genai.Client(api_key=api_key)
        self._model = model

    async def analyze(self, image_bytes: bytes, prompt: str) -> str:
        image_part = types.Part.from_bytes(data=image_bytes, mime_type=IMAGE_MIME_TYPE)
        response = await self._client.aio.models.generate_content(
            model=self._model,
            contents=[prompt, image_part],
        )
        match response.text:
            case None | "":
                raise ValueError(MSG_EMPTY_ANALYSIS)
            case text:
                return text
