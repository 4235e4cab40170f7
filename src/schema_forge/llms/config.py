# src/schema_forge/llms/config.py

from dataclasses import dataclass
from typing import Literal

DEFAULT_TIMEOUT = 120.0
DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_MAX_PAYLOAD_BYTES = 8192 * 40


@dataclass(frozen=True)
class LLMConfig:
    """Configuration for LLM clients.

    Immutable. Explicit. No magic defaults from environment.
    """

    provider: Literal["openai", "anthropic"] = "openai"
    model: str = "gpt-3.5-turbo"
    api_key: str | None = None  # Falls back to provider's env var
    timeout: float = DEFAULT_TIMEOUT
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    max_payload_bytes: int = DEFAULT_MAX_PAYLOAD_BYTES
