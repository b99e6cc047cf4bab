import json
from unittest.mock import MagicMock, patch

import httpx
import pytest
from openai import APIConnectionError, APIStatusError, APITimeoutError

from image_chat.errors import ConfigurationError, TransportError
from image_chat.llm.azure_client import AzureInferenceClient
from image_chat.llm.mock_client import MockChatClient
from image_chat.llm_input.request_builder import build_chat_request
from image_chat.response.decoder import Failure, Success, TextContent

ENDPOINT = "https://models.inference.ai.azure.com"


def _request():
    return build_chat_request(
        model="gpt-4o-mini",
        prompt="Describe",
        image_data_url="data:image/jpeg;base64,YWJj",
        temperature=0.4,
        max_tokens=1200,
    )


def _http_request():
    return httpx.Request("POST", f"{ENDPOINT}/chat/completions")


class TestMockChatClient:
    def test_default_model_name(self):
        assert MockChatClient().model_name == "mock-chat"

    def test_default_reply_is_html(self):
        response = MockChatClient().complete(_request())

        assert isinstance(response, Success)
        assert response.choices[0].content.text.startswith("<html>")

    def test_custom_content(self):
        response = MockChatClient(content="hello").complete(_request())
        assert response.choices[0].content == TextContent("hello")

    def test_custom_failure_body(self):
        client = MockChatClient(status="401", body={"error": {"code": "Unauthorized", "message": "bad token"}})
        response = client.complete(_request())

        assert isinstance(response, Failure)
        assert response.error.code == "Unauthorized"

    def test_records_requests(self):
        client = MockChatClient()
        request = _request()
        client.complete(request)

        assert client.requests == [request]


class TestAzureInferenceClient:
    def test_missing_token(self):
        with pytest.raises(ConfigurationError, match="GITHUB_TOKEN"):
            AzureInferenceClient(token="")

    @patch("image_chat.llm.azure_client.OpenAI")
    def test_openai_configured_without_retries(self, mock_openai):
        AzureInferenceClient(token="ghp_x", endpoint=ENDPOINT)

        mock_openai.assert_called_once_with(api_key="ghp_x", base_url=ENDPOINT, max_retries=0)

    @patch("image_chat.llm.azure_client.OpenAI")
    def test_success(self, mock_openai):
        body = {"choices": [{"message": {"role": "assistant", "content": "<html>...</html>"}}]}
        create = mock_openai.return_value.chat.completions.with_raw_response.create
        create.return_value = MagicMock(http_response=MagicMock(status_code=200, text=json.dumps(body)))

        client = AzureInferenceClient(token="ghp_x")
        request = _request()
        response = client.complete(request)

        create.assert_called_once_with(**request.to_payload())
        assert isinstance(response, Success)
        assert response.choices[0].content == TextContent("<html>...</html>")

    @patch("image_chat.llm.azure_client.OpenAI")
    def test_status_error_decoded_as_failure(self, mock_openai):
        body = {"error": {"code": "Unauthorized", "message": "bad token"}}
        http_response = httpx.Response(401, json=body, request=_http_request())
        create = mock_openai.return_value.chat.completions.with_raw_response.create
        create.side_effect = APIStatusError("Error code: 401", response=http_response, body=body)

        response = AzureInferenceClient(token="ghp_x").complete(_request())

        assert isinstance(response, Failure)
        assert response.status == 401
        assert response.error.code == "Unauthorized"
        assert response.error.message == "bad token"

    @patch("image_chat.llm.azure_client.OpenAI")
    def test_status_error_with_plain_text_body(self, mock_openai):
        http_response = httpx.Response(503, text="Service Unavailable", request=_http_request())
        create = mock_openai.return_value.chat.completions.with_raw_response.create
        create.side_effect = APIStatusError("Error code: 503", response=http_response, body=None)

        response = AzureInferenceClient(token="ghp_x").complete(_request())

        assert isinstance(response, Failure)
        assert response.error is None
        assert response.raw_body == "Service Unavailable"

    @patch("image_chat.llm.azure_client.OpenAI")
    def test_connection_error_raises_transport_error(self, mock_openai):
        create = mock_openai.return_value.chat.completions.with_raw_response.create
        create.side_effect = APIConnectionError(request=_http_request())

        with pytest.raises(TransportError, match="Network / transport error"):
            AzureInferenceClient(token="ghp_x").complete(_request())

        assert create.call_count == 1

    @patch("image_chat.llm.azure_client.OpenAI")
    def test_timeout_raises_transport_error(self, mock_openai):
        create = mock_openai.return_value.chat.completions.with_raw_response.create
        create.side_effect = APITimeoutError(request=_http_request())

        with pytest.raises(TransportError):
            AzureInferenceClient(token="ghp_x").complete(_request())
