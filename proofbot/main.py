"""Entry point — wires Config → LineClient + VisionClient → EventDispatcher → FastAPI."""
import logging

import uvicorn
from rich.logging import RichHandler

from proofbot.app import create_app
from proofbot.config import Config
from proofbot.constants import MSG_LISTENING, MSG_SERVER_STARTING, MSG_VISION_BACKEND
from proofbot.dispatcher import EventDispatcher
from proofbot.line.client import LineClient
from proofbot.vision.claude import ClaudeVisionClient
from proofbot.vision.client import VisionClient
from proofbot.vision.gemini import GeminiVisionClient
from proofbot.vision.openai import OpenAIVisionClient


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def build_vision_client(config: Config) -> VisionClient:
    """Pick the vision backend: Gemini first, then Claude, then OpenAI."""
    match (config.gemini_api_key, config.anthropic_api_key, config.openai_api_key):
        case (str() as k, _, _) if k:
            return GeminiVisionClient(k, model=config.gemini_model)
        case (_, str() as k, _) if k:
            return ClaudeVisionClient(k)
        case (_, _, str() as k) if k:
            return OpenAIVisionClient(k)
        case _:
            raise ValueError("No vision API key configured")


def main() -> None:
    config = Config.from_env()
    _setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    logger.info(MSG_SERVER_STARTING)

    messaging = LineClient(config)
    vision = build_vision_client(config)
    logger.info(MSG_VISION_BACKEND, type(vision).__name__)

    app = create_app(messaging, EventDispatcher(messaging, vision))
    logger.info(MSG_LISTENING, config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_config=None)


if __name__ == "__main__":
    main()
