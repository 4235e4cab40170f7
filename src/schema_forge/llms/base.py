# src/schema_forge/llms/base.py

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Protocol

from schema_forge.observability.base import MetricsHook


class Role(str, Enum):
    """Message role in a conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """A single message in the conversation.

    Immutable. Stateless. Provider-agnostic.
    """

    role: Role
    content: str


@dataclass(frozen=True)
class ModelRequest:
    """One logical model call.

    Built fresh for every call. `model=None` means the client's configured
    model is used.
    """

    messages: tuple[Message, ...]
    temperature: float = 0.7
    model: str | None = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError("temperature must be within [0, 1]")
        # Accept any sequence, store a tuple
        object.__setattr__(self, "messages", tuple(self.messages))

    @classmethod
    def from_prompts(
        cls,
        system: str,
        user: str,
        *,
        temperature: float = 0.7,
        model: str | None = None,
    ) -> "ModelRequest":
        return cls(
            messages=(
                Message(role=Role.SYSTEM, content=system),
                Message(role=Role.USER, content=user),
            ),
            temperature=temperature,
            model=model,
        )

    def payload_size(self) -> int:
        """Size in bytes of the JSON body this request serializes to."""
        body = {
            "model": self.model,
            "messages": [
                {"role": m.role.value, "content": m.content} for m in self.messages
            ],
            "temperature": self.temperature,
        }
        return len(json.dumps(body, ensure_ascii=False).encode("utf-8"))


@dataclass(frozen=True)
class Usage:
    """Token usage for a completion."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True)
class LLMResponse:
    """Normalized LLM response.

    Provider details never leak outside the adapter.
    `content` is None when the provider returned no choice or no text.
    """

    content: str | None
    finish_reason: Literal["stop", "length", "error"]
    usage: Usage = field(default_factory=Usage)
    latency_ms: float = 0.0


class LLMClient(Protocol):
    """Protocol for LLM transports.

    - Stateless: every call receives the full request
    - Single shot: no retries, RetryingModelClient owns the retry policy
    - No leakage: provider objects and provider exceptions never escape
    """

    metrics_hook: MetricsHook

    async def complete(self, request: ModelRequest) -> LLMResponse:
        """Single completion.

        Raises:
            ModelTimeoutError: The transport timed out.
            PermanentModelError: Any other provider failure.
        """
        ...
