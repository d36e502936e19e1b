"""
Relay Service
Handles: forwarding chat messages to the downstream webhook and relaying its reply
Port: 5000 (PORT)

- Settings are read once in create_app() and handed to everything that needs them
- The webhook's status, body and content type are passed back untouched
- Failures to reach the webhook become a 500 with details hidden in production
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import Depends, FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from config import Settings
from dependencies import get_webhook_client
from exceptions import InvalidMessageException, RelayException, normalize_error_status
from models import ChatRequest, ErrorResponse, HealthResponse
from relay import build_payload, forward_message, render_relay_result

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        mode = "production" if settings.production else "development"
        logger.info("[relay-service] Started on port %d (%s), forwarding to %s", settings.port, mode, settings.webhook_url)
        yield

    app = FastAPI(
        title="Relay Service",
        description="Forwards chat messages to a webhook and relays its reply.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.transport = transport

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Error handlers ────────────────────────────────────────────────────────

    @app.exception_handler(RelayException)
    async def relay_error(request: Request, exc: RelayException):
        content = {"error": exc.detail}
        if exc.details is not None and not settings.production:
            content["details"] = exc.details
        return JSONResponse(status_code=normalize_error_status(exc.status_code), content=content)

    @app.exception_handler(404)
    async def not_found(request: Request, exc: HTTPException):
        return JSONResponse(status_code=404, content={"error": "Not Found", "message": "Check /docs for available endpoints."})

    @app.exception_handler(500)
    async def server_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s", request.url.path, exc_info=exc)
        content = {"error": "Internal Server Error"}
        if not settings.production:
            content["details"] = str(exc)
        return JSONResponse(status_code=500, content=content)

    # ── Endpoints ─────────────────────────────────────────────────────────────

    @app.get("/api/health", response_model=HealthResponse)
    async def health():
        return {"status": "ok"}

    @app.post(
        "/api/chat",
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def chat(request: Request, client: httpx.AsyncClient = Depends(get_webhook_client)):
        if "application/json" not in request.headers.get("content-type", ""):
            raise InvalidMessageException()
        try:
            body = await request.json()
        except ValueError:
            raise InvalidMessageException()
        try:
            message = ChatRequest.model_validate(body)
        except ValidationError:
            raise InvalidMessageException()

        result = await forward_message(client, settings.webhook_url, build_payload(message))
        return render_relay_result(result, settings)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=app.state.settings.port, reload=True)
