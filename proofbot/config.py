from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from proofbot.constants import DEFAULT_HOST, DEFAULT_PORT, GEMINI_VISION_MODEL


@dataclass(frozen=True)
class Config:
    channel_access_token: str
    channel_secret: str
    gemini_api_key: Optional[str]
    anthropic_api_key: Optional[str]
    openai_api_key: Optional[str]
    gemini_model: str
    host: str
    port: int
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        access_token = os.getenv("CHANNEL_ACCESS_TOKEN")
        secret = os.getenv("CHANNEL_SECRET")
        gemini_api_key = os.getenv("GEMINI_API_KEY") or None
        anthropic_api_key = os.getenv("ANTHROPIC_API_KEY") or None
        openai_api_key = os.getenv("OPENAI_API_KEY") or None
        gemini_model = os.getenv("GEMINI_MODEL") or GEMINI_VISION_MODEL
        host = os.getenv("HOST", DEFAULT_HOST)
        port = os.getenv("PORT") or DEFAULT_PORT
        log_level = os.getenv("LOG_LEVEL", "INFO")

        return cls._validate(
            channel_access_token=access_token,
            channel_secret=secret,
            gemini_api_key=gemini_api_key,
            anthropic_api_key=anthropic_api_key,
            openai_api_key=openai_api_key,
            gemini_model=gemini_model,
            host=host,
            port=port,
            log_level=log_level,
        )

    @staticmethod
    def _validate(
        channel_access_token: Optional[str],
        channel_secret: Optional[str],
        gemini_api_key: Optional[str],
        anthropic_api_key: Optional[str],
        openai_api_key: Optional[str],
        gemini_model: str,
        host: str,
        port: str,
        log_level: str,
    ) -> "Config":
        match channel_access_token:
            case None | "":
                raise ValueError("CHANNEL_ACCESS_TOKEN must be set in .env")
            case _:
                pass

        match channel_secret:
            case None | "":
                raise ValueError("CHANNEL_SECRET must be set in .env")
            case _:
                pass

        match (gemini_api_key, anthropic_api_key, openai_api_key):
            case (None, None, None):
                raise ValueError(
                    "GEMINI_API_KEY (or ANTHROPIC_API_KEY / OPENAI_API_KEY) must be set in .env"
                )
            case _:
                pass

        try:
            parsed_port = int(port)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {port!r}") from None

        return Config(
            channel_access_token=channel_access_token,
            channel_secret=channel_secret,
            gemini_api_key=gemini_api_key,
            anthropic_api_key=anthropic_api_key,
            openai_api_key=openai_api_key,
            gemini_model=gemini_model,
            host=host,
            port=parsed_port,
            log_level=log_level,
        )
