# src/schema_forge/llms/retrying.py

"""Retry-protected model invocation.

One logical request is attempted up to `max_attempts` times. Only
timeout-class failures are retried, immediately and without backoff. Any
other failure, or a timeout on the final attempt, is raised right away.
Each attempt runs under its own wall-clock timeout, so a timeout consumes
one attempt instead of aborting the whole invocation.
"""

import asyncio
import logging

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_none,
)

from schema_forge.errors import (
    ModelError,
    ModelTimeoutError,
    PayloadTooLargeError,
    PermanentModelError,
)
from schema_forge.observability import names
from schema_forge.observability.base import MetricsHook, NoOpMetricsHook

from .base import LLMClient, LLMResponse, ModelRequest
from .config import DEFAULT_MAX_ATTEMPTS, DEFAULT_MAX_PAYLOAD_BYTES, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


def is_timeout_error(exc: BaseException) -> bool:
    """Timeout-class failures are the only retryable ones."""
    if isinstance(exc, (ModelTimeoutError, TimeoutError)):
        return True
    return "timeout" in str(exc).lower()


class RetryingModelClient:
    def __init__(
        self,
        client: LLMClient,
        *,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        timeout: float = DEFAULT_TIMEOUT,
        max_payload_bytes: int = DEFAULT_MAX_PAYLOAD_BYTES,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self._client = client
        self._max_attempts = max_attempts
        self._timeout = timeout
        self._max_payload_bytes = max_payload_bytes
        self.metrics_hook = metrics_hook

    async def invoke(self, request: ModelRequest) -> LLMResponse:
        """Run `request` with bounded retry.

        Raises:
            ModelTimeoutError: Every attempt timed out.
            PermanentModelError: A non-timeout failure, on its first occurrence.
        """
        size = request.payload_size()
        if size > self._max_payload_bytes:
            raise PayloadTooLargeError(
                f"Request payload is {size} bytes, limit is {self._max_payload_bytes}"
            )

        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_none(),
            retry=retry_if_exception(is_timeout_error),
            before_sleep=self._log_retry,
            reraise=True,
        ):
            with attempt:
                return await self._attempt(request)

        # AsyncRetrying either returns or re-raises; this line is unreachable
        raise AssertionError("retry loop exited without result")

    async def _attempt(self, request: ModelRequest) -> LLMResponse:
        try:
            return await asyncio.wait_for(
                self._client.complete(request), timeout=self._timeout
            )
        except ModelError:
            raise
        except Exception as exc:
            # Foreign failures are classified by their message
            if is_timeout_error(exc):
                raise ModelTimeoutError(
                    f"Model call timeout after {self._timeout}s: {exc}"
                ) from exc
            raise PermanentModelError(f"Model call failed: {exc}") from exc

    def _log_retry(self, retry_state: RetryCallState) -> None:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning(
            "Model call timed out, retrying (%d/%d): %s",
            retry_state.attempt_number,
            self._max_attempts - 1,
            exc,
        )
        self.metrics_hook.increment(names.LLM_RETRIES_TOTAL)
