"""FastAPI app exposing the prompt dispatcher as a single POST endpoint."""

from __future__ import annotations

import json
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from career_assistant.clients.llm_client import LLMClient
from career_assistant.config import AppConfig, load_config
from career_assistant.dispatcher.service import CareerDispatcher
from career_assistant.errors import (
    ConfigurationError,
    InvalidContentError,
    UnknownRequestTypeError,
    UpstreamError,
)

logger = logging.getLogger(__name__)

DISPATCH_PATHS = ("/", "/ai-career-assistant")


class EmptyPreflightCORSMiddleware(CORSMiddleware):
    """CORSMiddleware whose preflight answers carry no body."""

    def preflight_response(self, request_headers) -> Response:
        response = super().preflight_response(request_headers)
        headers = {
            k: v for k, v in response.headers.items()
            if k.lower() not in ("content-length", "content-type")
        }
        return Response(status_code=response.status_code, headers=headers)


def create_app(config: AppConfig | None = None, llm: LLMClient | None = None) -> FastAPI:
    """Build the dispatcher app.

    Without an explicit ``llm`` one is created from ANTHROPIC_API_KEY. A
    missing key is logged at startup and every dispatch then answers 500.
    """
    config = config or load_config()
    if llm is None:
        try:
            llm = LLMClient(timeout=config.llm.timeout, max_retries=config.llm.max_retries)
        except ConfigurationError:
            logger.error("Anthropic API key not configured; dispatcher requests will fail")

    dispatcher = CareerDispatcher(llm, config.llm)

    app = FastAPI(
        title="Career Assistant API",
        description="Prompt dispatcher for resume, cover letter, skill gap and interview tools",
        version="0.1.0",
    )
    app.state.dispatcher = dispatcher

    app.add_middleware(
        EmptyPreflightCORSMiddleware,
        allow_origins=list(config.server.cors_origins),
        allow_methods=["*"],
        allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
    )

    @app.exception_handler(ConfigurationError)
    async def _configuration_error(request: Request, exc: ConfigurationError):
        return JSONResponse({"error": str(exc)}, status_code=500)

    @app.exception_handler(UnknownRequestTypeError)
    async def _unknown_type(request: Request, exc: UnknownRequestTypeError):
        return JSONResponse({"error": "Invalid request type"}, status_code=400)

    @app.exception_handler(InvalidContentError)
    async def _invalid_content(request: Request, exc: InvalidContentError):
        return JSONResponse({"error": str(exc), "details": exc.details}, status_code=400)

    @app.exception_handler(UpstreamError)
    async def _upstream_error(request: Request, exc: UpstreamError):
        return JSONResponse({"error": str(exc)}, status_code=500)

    @app.exception_handler(Exception)
    async def _unexpected_error(request: Request, exc: Exception):
        logger.error("Error in career assistant dispatcher", exc_info=exc)
        return JSONResponse({"error": str(exc)}, status_code=500)

    async def dispatch(request: Request) -> JSONResponse:
        dispatcher: CareerDispatcher = request.app.state.dispatcher
        if not dispatcher.configured:
            raise ConfigurationError("Anthropic API key not configured")
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidContentError("Request body must be valid JSON") from e
        result = await dispatcher.handle(payload)
        return JSONResponse(result)

    async def preflight() -> Response:
        return Response(status_code=200)

    for path in DISPATCH_PATHS:
        app.add_api_route(path, dispatch, methods=["POST"])
        app.add_api_route(path, preflight, methods=["OPTIONS"])

    @app.get("/health")
    async def health():
        return {"status": "ok", "configured": dispatcher.configured}

    return app
