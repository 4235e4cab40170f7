from collections.abc import Awaitable, Callable

import pytest

from schema_forge.llms.base import LLMResponse, ModelRequest, Usage
from schema_forge.prompts import PromptsLibrary

Handler = Callable[[ModelRequest], Awaitable[LLMResponse]]


def make_response(content: str | None) -> LLMResponse:
    return LLMResponse(
        content=content,
        finish_reason="stop" if content is not None else "error",
        usage=Usage(prompt_tokens=1, completion_tokens=1, total_tokens=2),
        latency_ms=1.0,
    )


class ScriptedModelClient:
    """Stands in for RetryingModelClient; `handler` decides each outcome."""

    def __init__(self, handler: Handler) -> None:
        self._handler = handler
        self.requests: list[ModelRequest] = []

    async def invoke(self, request: ModelRequest) -> LLMResponse:
        self.requests.append(request)
        return await self._handler(request)


@pytest.fixture
def response_factory() -> Callable[[str | None], LLMResponse]:
    return make_response


@pytest.fixture
def scripted_client() -> Callable[[Handler], ScriptedModelClient]:
    return ScriptedModelClient


@pytest.fixture(scope="session")
def prompts() -> PromptsLibrary:
    """The prompts shipped with the package."""
    return PromptsLibrary()
