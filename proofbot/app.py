"""FastAPI app exposing the LINE webhook endpoint."""
import asyncio
import logging

from fastapi import FastAPI, Header, Request, Response
from fastapi.responses import JSONResponse
from linebot.v3.exceptions import InvalidSignatureError

from proofbot.bot_client import MessagingClient
from proofbot.constants import (
    CALLBACK_PATH,
    MSG_BATCH_FAILED,
    MSG_HANDLER_FAILED,
    MSG_INVALID_SIGNATURE,
    MSG_INVALID_SIGNATURE_DETAIL,
    SIGNATURE_HEADER,
)
from proofbot.dispatcher import EventDispatcher

logger = logging.getLogger(__name__)


def create_app(messaging: MessagingClient, dispatcher: EventDispatcher) -> FastAPI:
    """Build the app around already-constructed clients."""
    app = FastAPI()

    @app.post(CALLBACK_PATH)
    async def callback(
        request: Request,
        signature: str = Header(default="", alias=SIGNATURE_HEADER),
    ) -> Response:
        body = await request.body()
        try:
            events = messaging.parse_events(body.decode(), signature)
        except (InvalidSignatureError, UnicodeDecodeError):
            logger.warning(MSG_INVALID_SIGNATURE)
            return JSONResponse({"detail": MSG_INVALID_SIGNATURE_DETAIL}, status_code=401)
        except Exception:
            logger.exception(MSG_BATCH_FAILED)
            return Response(status_code=500)

        results = await asyncio.gather(
            *map(dispatcher.dispatch, events), return_exceptions=True
        )
        failures = [r for r in results if isinstance(r, BaseException)]
        match failures:
            case []:
                return JSONResponse(list(results))
            case _:
                for exc in failures:
                    logger.error(MSG_HANDLER_FAILED, exc, exc_info=exc)
                return Response(status_code=500)

    return app
