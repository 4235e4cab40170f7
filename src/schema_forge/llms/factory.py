# src/schema_forge/llms/factory.py

from schema_forge.observability.base import MetricsHook, NoOpMetricsHook

from .base import LLMClient
from .config import LLMConfig
from .retrying import RetryingModelClient


def create_llm_client(
    config: LLMConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> LLMClient:
    """Create a single-shot provider transport from config.

    Raises:
        ValueError: If provider is unknown.
    """
    if config.provider == "openai":
        from .openai import OpenAILLMClient

        return OpenAILLMClient(
            api_key=config.api_key,
            model=config.model,
            timeout=config.timeout,
            metrics_hook=metrics_hook,
        )

    if config.provider == "anthropic":
        from .anthropic import AnthropicLLMClient

        return AnthropicLLMClient(
            api_key=config.api_key,
            model=config.model,
            timeout=config.timeout,
            metrics_hook=metrics_hook,
        )

    raise ValueError(f"Unknown LLM provider: {config.provider}")


def create_model_client(
    config: LLMConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> RetryingModelClient:
    """Create the retry-protected client the pipeline talks to.

    Example:
        >>> client = create_model_client(LLMConfig(provider="openai"))
        >>> response = await client.invoke(
        ...     ModelRequest.from_prompts("You are terse.", "Hello!")
        ... )
    """
    return RetryingModelClient(
        create_llm_client(config, metrics_hook),
        max_attempts=config.max_attempts,
        timeout=config.timeout,
        max_payload_bytes=config.max_payload_bytes,
        metrics_hook=metrics_hook,
    )
