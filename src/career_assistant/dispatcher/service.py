"""Prompt dispatcher: one request type in, one upstream call, one JSON payload out."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from career_assistant.clients.llm_client import LLMClient
from career_assistant.config import LLMConfig
from career_assistant.dispatcher.prompts import TEMPLATES, build_prompt
from career_assistant.errors import (
    ConfigurationError,
    InvalidContentError,
    UnknownRequestTypeError,
)
from career_assistant.models.requests import CONTENT_MODELS, ContentModel, RequestType
from career_assistant.utils.json_parser import extract_json

logger = logging.getLogger(__name__)

PARSE_ERROR_MESSAGE = "Failed to parse AI response"


def parse_envelope(payload: Any) -> tuple[RequestType, ContentModel]:
    """Validate a raw ``{type, content}`` body.

    The type is checked first so an unknown tag is reported as such even when
    the content is also malformed.
    """
    if not isinstance(payload, dict):
        raise InvalidContentError("Request body must be a JSON object")
    raw_type = payload.get("type")
    try:
        request_type = RequestType(raw_type)
    except ValueError:
        raise UnknownRequestTypeError(raw_type) from None

    content = payload.get("content")
    if not isinstance(content, dict):
        raise InvalidContentError("Request content must be a JSON object")
    try:
        model = CONTENT_MODELS[request_type].model_validate(content)
    except ValidationError as e:
        details = [
            {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]}
            for err in e.errors()
        ]
        raise InvalidContentError("Invalid request content", details) from e
    return request_type, model


def parse_reply(request_type: RequestType, text: str) -> dict | list:
    """Shape generated text into the response payload for its request type.

    Cover letters are returned verbatim as ``{"content": text}``. Every other
    type is parsed as JSON; on failure the payload is ``{"error", "raw"}``
    with the original text untouched.
    """
    if not TEMPLATES[request_type].expects_json:
        return {"content": text}
    try:
        return extract_json(text)
    except ValueError:
        logger.warning("Failed to parse JSON for %s; raw response: %r", request_type.value, text)
        return {"error": PARSE_ERROR_MESSAGE, "raw": text}


class CareerDispatcher:
    """Maps request types to prompt templates and forwards them upstream.

    ``llm`` may be None when no API key is configured; dispatching then fails
    with ConfigurationError before any upstream call.
    """

    def __init__(self, llm: LLMClient | None, config: LLMConfig | None = None):
        self.llm = llm
        self.config = config or LLMConfig()

    @property
    def configured(self) -> bool:
        return self.llm is not None

    async def dispatch(self, request_type: RequestType, content: ContentModel) -> dict | list:
        if self.llm is None:
            raise ConfigurationError("Anthropic API key not configured")
        if request_type not in TEMPLATES:
            raise UnknownRequestTypeError(request_type)

        system, prompt = build_prompt(request_type, content)
        logger.info("Processing %s request...", request_type.value)
        response = await self.llm.generate(
            prompt=prompt,
            system=system,
            model=self.config.model,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
        )
        return parse_reply(request_type, response.text)

    async def handle(self, payload: Any) -> dict | list:
        """Validate a raw envelope and dispatch it."""
        if self.llm is None:
            raise ConfigurationError("Anthropic API key not configured")
        request_type, content = parse_envelope(payload)
        return await self.dispatch(request_type, content)
