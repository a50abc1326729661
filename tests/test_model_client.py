from __future__ import annotations

from types import SimpleNamespace

import anthropic
import httpx
import pytest

from blogwriter.errors import ModelCallError
from blogwriter.pipeline.model_client import ModelClient

API_URL = "https://api.anthropic.com/v1/messages"


# -----------------------------
# Test doubles
# -----------------------------
class FakeMessages:
    def __init__(self, result=None, error: Exception | None = None):
        self.result = result
        self.error = error
        self.calls: list[dict] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return self.result


def make_client(result=None, error=None) -> tuple[ModelClient, FakeMessages]:
    messages = FakeMessages(result, error)
    fake = SimpleNamespace(messages=messages)
    return ModelClient(api_key="sk-test", model="claude-test", client=fake), messages


def text_message(text: str):
    return SimpleNamespace(
        content=[SimpleNamespace(type="text", text=text)],
        usage=SimpleNamespace(input_tokens=10, output_tokens=20),
    )


# -----------------------------
# Tests
# -----------------------------
def test_complete_returns_text_and_sends_single_user_message():
    client, messages = make_client(result=text_message("generated"))

    assert client.complete("Write something") == "generated"
    call = messages.calls[0]
    assert call["model"] == "claude-test"
    assert call["max_tokens"] == 4096
    assert call["messages"] == [{"role": "user", "content": "Write something"}]


def test_status_error_message_passes_through_verbatim():
    request = httpx.Request("POST", API_URL)
    response = httpx.Response(400, request=request)
    error = anthropic.BadRequestError(
        "Your credit balance is too low to access the Anthropic API.",
        response=response,
        body=None,
    )
    client, _ = make_client(error=error)

    with pytest.raises(ModelCallError) as exc_info:
        client.complete("prompt")
    assert "Your credit balance is too low" in exc_info.value.message
    assert exc_info.value.__cause__ is error


def test_timeout_is_classified_as_model_call_error():
    client, _ = make_client(error=anthropic.APITimeoutError(request=httpx.Request("POST", API_URL)))

    with pytest.raises(ModelCallError, match="APITimeoutError"):
        client.complete("prompt")


def test_connection_error_is_classified_as_model_call_error():
    client, _ = make_client(error=anthropic.APIConnectionError(request=httpx.Request("POST", API_URL)))

    with pytest.raises(ModelCallError):
        client.complete("prompt")


def test_non_text_block_is_rejected():
    message = SimpleNamespace(content=[SimpleNamespace(type="tool_use")], usage=None)
    client, _ = make_client(result=message)

    with pytest.raises(ModelCallError, match="unexpected response type"):
        client.complete("prompt")


def test_empty_content_is_rejected():
    client, _ = make_client(result=SimpleNamespace(content=[], usage=None))

    with pytest.raises(ModelCallError, match="empty response"):
        client.complete("prompt")


def test_default_sdk_client_has_retries_disabled():
    client = ModelClient(api_key="sk-test")
    assert client.client.max_retries == 0
