"""
Forwarding a chat message to the downstream webhook.

The outbound call is split in two steps so every outcome can be tested on its own:
forward_message() performs the request and classifies what came back, and
render_relay_result() turns that classification into the response for the caller.
"""

import logging
from dataclasses import dataclass
from typing import Any, Union

import httpx
from fastapi import Response
from fastapi.responses import JSONResponse, PlainTextResponse

from config import Settings
from exceptions import WebhookUnreachableException
from models import ChatRequest
from text_utils import loads_strict

logger = logging.getLogger(__name__)


@dataclass
class Unreachable:
    error: Exception


@dataclass
class ErrorStatus:
    status: int
    text: str


@dataclass
class JsonBody:
    status: int
    value: Any


@dataclass
class TextBody:
    status: int
    text: str


RelayResult = Union[Unreachable, ErrorStatus, JsonBody, TextBody]


def build_payload(chat: ChatRequest) -> dict:
    # A sessionId the caller never sent is left out of the body entirely
    return chat.model_dump(include={"message", "sessionId"}, exclude_unset=True)


async def forward_message(client: httpx.AsyncClient, url: str, payload: dict) -> RelayResult:
    try:
        request = client.build_request("POST", url, json=payload)
        response = await client.send(request, stream=True)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error("Webhook call to %s failed: %r", url, e)
        return Unreachable(e)

    try:
        status = response.status_code
        if not response.is_success:
            try:
                await response.aread()
                text = response.text
            except httpx.HTTPError:
                text = ""
            logger.warning("Webhook responded with status %d", status)
            return ErrorStatus(status, text)

        try:
            await response.aread()
        except httpx.HTTPError as e:
            logger.error("Could not read webhook response: %r", e)
            return Unreachable(e)

        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            try:
                return JsonBody(status, loads_strict(response.content))
            except ValueError as e:
                logger.error("Webhook sent malformed JSON: %r", e)
                return Unreachable(e)

        return TextBody(status, response.text)
    finally:
        await response.aclose()


def render_relay_result(result: RelayResult, settings: Settings) -> Response:
    if isinstance(result, Unreachable):
        details = None if settings.production else str(result.error)
        raise WebhookUnreachableException(details=details)
    if isinstance(result, ErrorStatus):
        return PlainTextResponse(result.text or "Webhook error", status_code=result.status)
    if isinstance(result, JsonBody):
        return JSONResponse(content=result.value, status_code=result.status)
    return PlainTextResponse(result.text, status_code=result.status)
