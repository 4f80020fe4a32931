from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from souverain.enrichment.exceptions import EnrichmentError, EnrichmentNetworkError
from souverain.enrichment.openai_client_adapter import OpenAIClientAdapter

_OPENAI_PATH = "souverain.enrichment.openai_client_adapter.openai.OpenAI"


def _make_mock_response(content: str | None, finish_reason: str = "stop") -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    choice.finish_reason = finish_reason
    response = MagicMock()
    response.choices = [choice]
    return response


def _call(adapter: OpenAIClientAdapter) -> str:
    return adapter.create_chat_completion(
        model="m",
        temperature=0.4,
        max_tokens=4000,
        system_prompt="system",
        user_prompt="user",
        json_schema={"type": "object"},
    )


class TestOpenAIClientAdapter:
    def test_returns_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response('{"ok": true}')
        with patch(_OPENAI_PATH, return_value=mock_client):
            adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30)
            assert _call(adapter) == '{"ok": true}'

    def test_sends_strict_schema_and_limits(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("{}")
        with patch(_OPENAI_PATH, return_value=mock_client):
            _call(OpenAIClientAdapter(api_key="k", timeout_seconds=30))
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["max_tokens"] == 4000
        assert kwargs["temperature"] == 0.4
        assert kwargs["response_format"]["json_schema"]["strict"] is True
        assert kwargs["response_format"]["json_schema"]["name"] == "enriched_portfolio"
        assert kwargs["messages"][0] == {"role": "system", "content": "system"}

    def test_client_built_without_retries(self) -> None:
        with patch(_OPENAI_PATH) as mock_openai:
            OpenAIClientAdapter(api_key="k", timeout_seconds=12, base_url="http://x/v1")
        mock_openai.assert_called_once_with(
            api_key="k", timeout=12, base_url="http://x/v1", max_retries=0
        )

    def test_raises_error_for_empty_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(None)
        with patch(_OPENAI_PATH, return_value=mock_client):
            adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30)
            with pytest.raises(EnrichmentError, match="empty response"):
                _call(adapter)

    def test_raises_error_for_truncated_response(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(
            '{"heroTitle": "PERS', finish_reason="length"
        )
        with patch(_OPENAI_PATH, return_value=mock_client):
            adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30)
            with pytest.raises(EnrichmentError, match="truncated"):
                _call(adapter)

    def test_raises_error_for_no_choices(self) -> None:
        response = MagicMock()
        response.choices = []
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = response
        with patch(_OPENAI_PATH, return_value=mock_client):
            adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30)
            with pytest.raises(EnrichmentError, match="no choices"):
                _call(adapter)

    def test_raises_network_error_on_connection_failure(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=MagicMock()
        )
        with patch(_OPENAI_PATH, return_value=mock_client):
            adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30)
            with pytest.raises(EnrichmentNetworkError, match="network error"):
                _call(adapter)

    def test_raises_network_error_on_timeout(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = httpx.TimeoutException("timeout")
        with patch(_OPENAI_PATH, return_value=mock_client):
            adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30)
            with pytest.raises(EnrichmentNetworkError, match="network error"):
                _call(adapter)

    def test_raises_network_error_on_api_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIError(
            message="server error",
            request=MagicMock(),
            body=None,
        )
        with patch(_OPENAI_PATH, return_value=mock_client):
            adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30)
            with pytest.raises(EnrichmentNetworkError, match="API error"):
                _call(adapter)
