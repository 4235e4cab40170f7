# tests/unit/llms/test_anthropic_client.py

from unittest.mock import AsyncMock, MagicMock, Mock, patch

import pytest
from anthropic import APITimeoutError

from schema_forge.errors import ModelTimeoutError
from schema_forge.llms.anthropic import AnthropicLLMClient
from schema_forge.llms.base import Message, ModelRequest, Role


@pytest.fixture
def mock_anthropic_response() -> MagicMock:
    """Create a mock Anthropic response."""
    response = MagicMock()

    text_block = MagicMock()
    text_block.type = "text"
    text_block.text = "```js\nmodule.exports = {};\n```"

    response.content = [text_block]
    response.stop_reason = "end_turn"
    response.usage.input_tokens = 10
    response.usage.output_tokens = 8
    return response


class TestAnthropicLLMClient:
    @pytest.mark.asyncio
    async def test_complete_basic(self, mock_anthropic_response: MagicMock) -> None:
        with patch("schema_forge.llms.anthropic.AsyncAnthropic") as mock_anthropic:
            mock_client = AsyncMock()
            mock_client.messages.create.return_value = mock_anthropic_response
            mock_anthropic.return_value = mock_client

            client = AnthropicLLMClient(api_key="test-key")
            response = await client.complete(
                ModelRequest.from_prompts("Generate CRUD.", "{}", temperature=0.7)
            )

            assert response.content == "```js\nmodule.exports = {};\n```"
            assert response.finish_reason == "stop"
            assert response.usage.total_tokens == 18

            call = mock_client.messages.create.call_args
            assert call.kwargs["system"] == "Generate CRUD."
            assert call.kwargs["messages"] == [{"role": "user", "content": "{}"}]
            assert call.kwargs["temperature"] == 0.7

    def test_system_message_extraction(self) -> None:
        with patch("schema_forge.llms.anthropic.AsyncAnthropic"):
            client = AnthropicLLMClient(api_key="test-key")

            system, non_system = client._extract_system(
                (
                    Message(role=Role.SYSTEM, content="You are helpful."),
                    Message(role=Role.USER, content="Hello"),
                )
            )

            assert system == "You are helpful."
            assert len(non_system) == 1
            assert non_system[0].role == Role.USER

    def test_no_system_message(self) -> None:
        with patch("schema_forge.llms.anthropic.AsyncAnthropic"):
            client = AnthropicLLMClient(api_key="test-key")

            system, non_system = client._extract_system(
                (Message(role=Role.USER, content="Hello"),)
            )

            assert system is None
            assert len(non_system) == 1

    @pytest.mark.asyncio
    async def test_max_tokens_finish_reason(self) -> None:
        with patch("schema_forge.llms.anthropic.AsyncAnthropic") as mock_anthropic:
            response = MagicMock()
            text_block = MagicMock()
            text_block.type = "text"
            text_block.text = "Truncated..."
            response.content = [text_block]
            response.stop_reason = "max_tokens"
            response.usage.input_tokens = 10
            response.usage.output_tokens = 100

            mock_client = AsyncMock()
            mock_client.messages.create.return_value = response
            mock_anthropic.return_value = mock_client

            client = AnthropicLLMClient(api_key="test-key")
            result = await client.complete(
                ModelRequest(messages=[Message(role=Role.USER, content="test")])
            )

            assert result.finish_reason == "length"

    @pytest.mark.asyncio
    async def test_timeout_maps_to_model_timeout_error(self) -> None:
        with patch("schema_forge.llms.anthropic.AsyncAnthropic") as mock_anthropic:
            mock_client = AsyncMock()
            mock_client.messages.create.side_effect = APITimeoutError(request=Mock())
            mock_anthropic.return_value = mock_client

            client = AnthropicLLMClient(api_key="test-key")

            with pytest.raises(ModelTimeoutError):
                await client.complete(
                    ModelRequest(messages=[Message(role=Role.USER, content="test")])
                )

    @pytest.mark.asyncio
    async def test_token_usage_counters(self, mock_anthropic_response: MagicMock) -> None:
        with patch("schema_forge.llms.anthropic.AsyncAnthropic") as mock_anthropic:
            mock_client = AsyncMock()
            mock_client.messages.create.return_value = mock_anthropic_response
            mock_anthropic.return_value = mock_client

            metrics_hook = MagicMock()
            client = AnthropicLLMClient(api_key="test-key", metrics_hook=metrics_hook)

            await client.complete(ModelRequest.from_prompts("Generate CRUD.", "{}"))

            metrics_hook.increment.assert_any_call("llm_tokens_prompt", 10)
            metrics_hook.increment.assert_any_call("llm_tokens_completion", 8)
            metrics_hook.increment.assert_any_call("llm_tokens_total", 18)
