# src/schema_forge/llms/openai.py

import logging
from time import monotonic
from typing import Any, Literal

from openai import APIStatusError, APITimeoutError, AsyncOpenAI, OpenAIError

from schema_forge.errors import ModelTimeoutError, PermanentModelError
from schema_forge.observability import names
from schema_forge.observability.base import MetricsHook, NoOpMetricsHook

from .base import LLMClient, LLMResponse, Message, ModelRequest, Usage

logger = logging.getLogger(__name__)


class OpenAILLMClient(LLMClient):
    """OpenAI chat completions transport.

    Single shot. SDK retries are disabled; RetryingModelClient decides.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gpt-3.5-turbo",
        timeout: float = 120.0,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        self._client = AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0)
        self._model = model
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized OpenAILLMClient with model=%s, timeout=%s",
            model,
            timeout,
        )

    async def complete(self, request: ModelRequest) -> LLMResponse:
        start = monotonic()
        model = request.model or self._model

        logger.debug(
            "Calling OpenAI: model=%s, messages=%d, temperature=%s",
            model,
            len(request.messages),
            request.temperature,
        )

        try:
            raw = await self._client.chat.completions.create(
                model=model,
                messages=self._convert_messages(request.messages),  # type: ignore[arg-type]
                temperature=request.temperature,
            )
        except APITimeoutError as exc:
            self.metrics_hook.increment(
                names.LLM_ERRORS_TOTAL, labels={"provider": "openai", "kind": "timeout"}
            )
            raise ModelTimeoutError(f"OpenAI request timeout: {exc}") from exc
        except APIStatusError as exc:
            self.metrics_hook.increment(
                names.LLM_ERRORS_TOTAL, labels={"provider": "openai", "kind": "status"}
            )
            raise PermanentModelError(
                f"OpenAI request failed with status {exc.status_code}: {exc}",
                payload=exc.body,
            ) from exc
        except OpenAIError as exc:
            self.metrics_hook.increment(
                names.LLM_ERRORS_TOTAL, labels={"provider": "openai", "kind": "other"}
            )
            raise PermanentModelError(f"OpenAI request failed: {exc}") from exc

        elapsed_ms = 1000 * (monotonic() - start)

        # Normalize immediately - provider objects never escape
        response = self._normalize_response(raw, elapsed_ms)

        self.metrics_hook.record_latency(names.LLM_COMPLETION_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.LLM_REQUESTS_TOTAL,
            labels={"provider": "openai", "model": model},
        )
        self.metrics_hook.increment(names.LLM_TOKENS_PROMPT, response.usage.prompt_tokens)
        self.metrics_hook.increment(
            names.LLM_TOKENS_COMPLETION, response.usage.completion_tokens
        )
        self.metrics_hook.increment(names.LLM_TOKENS_TOTAL, response.usage.total_tokens)

        logger.info(
            "OpenAI completion: finish=%s, tokens=%d, latency=%.0fms",
            response.finish_reason,
            response.usage.total_tokens,
            elapsed_ms,
        )

        return response

    def _convert_messages(self, messages: tuple[Message, ...]) -> list[dict]:
        """Convert Message objects to OpenAI format."""
        return [{"role": m.role.value, "content": m.content} for m in messages]

    def _normalize_response(self, raw: Any, latency_ms: float) -> LLMResponse:
        """Normalize OpenAI response to LLMResponse.

        No choices means no content; callers treat that as an empty result.
        """
        usage = Usage()
        if raw.usage is not None:
            usage = Usage(
                prompt_tokens=raw.usage.prompt_tokens,
                completion_tokens=raw.usage.completion_tokens,
                total_tokens=raw.usage.total_tokens,
            )

        if not raw.choices:
            logger.warning("OpenAI response carried no choices")
            return LLMResponse(
                content=None, finish_reason="error", usage=usage, latency_ms=latency_ms
            )

        choice = raw.choices[0]

        finish_reason: Literal["stop", "length", "error"]
        if choice.finish_reason == "stop":
            finish_reason = "stop"
        elif choice.finish_reason == "length":
            finish_reason = "length"
        else:
            finish_reason = "error"

        return LLMResponse(
            content=choice.message.content,
            finish_reason=finish_reason,
            usage=usage,
            latency_ms=latency_ms,
        )
