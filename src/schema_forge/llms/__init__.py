# src/schema_forge/llms/__init__.py

"""LLM client layer for schema-forge.

Two layers:
- Provider transports (OpenAI, Anthropic): single shot, normalized responses,
  provider exceptions mapped to schema_forge.errors
- RetryingModelClient: the only place a request is retried

Example:
    >>> from schema_forge.llms import LLMConfig, ModelRequest, create_model_client
    >>>
    >>> client = create_model_client(LLMConfig(provider="openai"))
    >>> response = await client.invoke(
    ...     ModelRequest.from_prompts("Answer briefly.", "Hello!")
    ... )
    >>> print(response.content)
"""

from .base import LLMClient, LLMResponse, Message, ModelRequest, Role, Usage
from .config import LLMConfig
from .factory import create_llm_client, create_model_client
from .retrying import RetryingModelClient, is_timeout_error

__all__ = [
    # Factory
    "create_llm_client",
    "create_model_client",
    # Protocol
    "LLMClient",
    "RetryingModelClient",
    "is_timeout_error",
    # Config
    "LLMConfig",
    # Types
    "Message",
    "ModelRequest",
    "Role",
    "LLMResponse",
    "Usage",
]
