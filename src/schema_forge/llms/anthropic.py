# src/schema_forge/llms/anthropic.py

import logging
from time import monotonic
from typing import Any, Literal

from anthropic import (
    NOT_GIVEN,
    APIError,
    APIStatusError,
    APITimeoutError,
    AsyncAnthropic,
)

from schema_forge.errors import ModelTimeoutError, PermanentModelError
from schema_forge.observability import names
from schema_forge.observability.base import MetricsHook, NoOpMetricsHook

from .base import LLMClient, LLMResponse, Message, ModelRequest, Role, Usage

logger = logging.getLogger(__name__)


class AnthropicLLMClient(LLMClient):
    """Anthropic messages transport.

    Single shot. SDK retries are disabled; RetryingModelClient decides.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "claude-sonnet-4-20250514",
        timeout: float = 120.0,
        max_tokens: int = 4096,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        self._client = AsyncAnthropic(api_key=api_key, timeout=timeout, max_retries=0)
        self._model = model
        self._max_tokens = max_tokens
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized AnthropicLLMClient with model=%s, timeout=%s",
            model,
            timeout,
        )

    async def complete(self, request: ModelRequest) -> LLMResponse:
        start = monotonic()
        model = request.model or self._model

        # Anthropic takes the system prompt as a separate parameter
        system_content, non_system_messages = self._extract_system(request.messages)

        logger.debug(
            "Calling Anthropic: model=%s, messages=%d",
            model,
            len(request.messages),
        )

        try:
            raw = await self._client.messages.create(
                model=model,
                messages=self._convert_messages(non_system_messages),  # type: ignore[arg-type]
                temperature=request.temperature,
                max_tokens=self._max_tokens,
                system=system_content if system_content else NOT_GIVEN,
            )
        except APITimeoutError as exc:
            self.metrics_hook.increment(
                names.LLM_ERRORS_TOTAL,
                labels={"provider": "anthropic", "kind": "timeout"},
            )
            raise ModelTimeoutError(f"Anthropic request timeout: {exc}") from exc
        except APIStatusError as exc:
            self.metrics_hook.increment(
                names.LLM_ERRORS_TOTAL,
                labels={"provider": "anthropic", "kind": "status"},
            )
            raise PermanentModelError(
                f"Anthropic request failed with status {exc.status_code}: {exc}",
                payload=exc.body,
            ) from exc
        except APIError as exc:
            self.metrics_hook.increment(
                names.LLM_ERRORS_TOTAL,
                labels={"provider": "anthropic", "kind": "other"},
            )
            raise PermanentModelError(f"Anthropic request failed: {exc}") from exc

        elapsed_ms = 1000 * (monotonic() - start)
        response = self._normalize_response(raw, elapsed_ms)

        self.metrics_hook.record_latency(names.LLM_COMPLETION_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.LLM_REQUESTS_TOTAL,
            labels={"provider": "anthropic", "model": model},
        )
        self.metrics_hook.increment(names.LLM_TOKENS_PROMPT, response.usage.prompt_tokens)
        self.metrics_hook.increment(
            names.LLM_TOKENS_COMPLETION, response.usage.completion_tokens
        )
        self.metrics_hook.increment(names.LLM_TOKENS_TOTAL, response.usage.total_tokens)

        logger.info(
            "Anthropic completion: finish=%s, tokens=%d, latency=%.0fms",
            response.finish_reason,
            response.usage.total_tokens,
            elapsed_ms,
        )

        return response

    def _extract_system(
        self, messages: tuple[Message, ...]
    ) -> tuple[str | None, list[Message]]:
        """Split the system prompt from the conversation.

        Multiple system messages are joined with blank lines.
        """
        system_parts = []
        non_system = []

        for m in messages:
            if m.role == Role.SYSTEM:
                system_parts.append(m.content)
            else:
                non_system.append(m)

        return ("\n\n".join(system_parts) or None), non_system

    def _convert_messages(self, messages: list[Message]) -> list[dict]:
        return [{"role": m.role.value, "content": m.content} for m in messages]

    def _normalize_response(self, raw: Any, latency_ms: float) -> LLMResponse:
        text_parts = [block.text for block in raw.content if block.type == "text"]

        finish_reason: Literal["stop", "length", "error"]
        if raw.stop_reason in ("end_turn", "stop_sequence"):
            finish_reason = "stop"
        elif raw.stop_reason == "max_tokens":
            finish_reason = "length"
        else:
            finish_reason = "error"

        return LLMResponse(
            content="".join(text_parts) if text_parts else None,
            finish_reason=finish_reason,
            usage=Usage(
                prompt_tokens=raw.usage.input_tokens,
                completion_tokens=raw.usage.output_tokens,
                total_tokens=raw.usage.input_tokens + raw.usage.output_tokens,
            ),
            latency_ms=latency_ms,
        )
