"""VisionClient — abstract base for image analysis backends."""
from abc import ABC, abstractmethod


class VisionClient(ABC):
    @abstractmethod
    async def analyze(self, image_bytes: bytes, prompt: str) -> str:
        """Analyze image bytes against the prompt and return the model's text. Raises on failure."""
        ...
