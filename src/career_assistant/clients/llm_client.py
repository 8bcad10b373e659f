"""Claude API wrapper used by the prompt dispatcher."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import anthropic

from career_assistant.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)


@dataclass
class LLMResponse:
    """Response from the LLM including usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int


class LLMClient:
    """Async Claude API client making exactly one call per generate()."""

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        max_retries: int = 0,
    ):
        key = api_key or os.environ.get("ANTHROPIC_API_KEY")
        if not key:
            raise ConfigurationError(
                "Anthropic API key required. Set ANTHROPIC_API_KEY env var or pass api_key."
            )
        kwargs: dict = {"api_key": key, "max_retries": max_retries}
        if timeout is not None:
            kwargs["timeout"] = timeout
        self.client = anthropic.AsyncAnthropic(**kwargs)
        self._token_log: list[tuple[str, int, int]] = []  # (model, input_tokens, output_tokens)

    async def generate(
        self,
        prompt: str,
        system: str = "",
        model: str = "claude-haiku-4-5-20251001",
        temperature: float = 0.7,
        max_tokens: int = 4096,
    ) -> LLMResponse:
        """Send a system + user prompt and return the text response with usage."""
        logger.debug("LLM call: model=%s", model)
        kwargs: dict = {
            "model": model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            kwargs["system"] = system
        try:
            message = await self.client.messages.create(**kwargs)
        except anthropic.APIStatusError as e:
            logger.error("LLM call failed with status %s", e.status_code, exc_info=True)
            raise UpstreamError(_upstream_message(e)) from e
        except anthropic.APIError as e:
            logger.error("LLM call failed", exc_info=True)
            raise UpstreamError(e.message or f"Anthropic API error: {type(e).__name__}") from e

        input_tokens = message.usage.input_tokens
        output_tokens = message.usage.output_tokens
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        self._token_log.append((model, input_tokens, output_tokens))
        text = "".join(
            block.text for block in message.content if getattr(block, "type", "text") == "text"
        )
        return LLMResponse(text=text, input_tokens=input_tokens, output_tokens=output_tokens)

    def get_token_summary(self) -> dict:
        """Return accumulated token usage and reset the log."""
        summary = {
            "input": sum(t[1] for t in self._token_log),
            "output": sum(t[2] for t in self._token_log),
            "calls": list(self._token_log),
        }
        self._token_log.clear()
        return summary


def _upstream_message(error: anthropic.APIStatusError) -> str:
    """Prefer the API's own error message over the SDK's formatted one."""
    body = error.body
    if isinstance(body, dict):
        detail = body.get("error")
        if isinstance(detail, dict) and detail.get("message"):
            return str(detail["message"])
    return error.message or f"Anthropic API error: {error.status_code}"
