from __future__ import annotations

from typing import Any

import pytest

from bedrock_bridge.adapters import settings as settings_module
from bedrock_bridge.adapters.bedrock_adapter import BedrockChatAdapter
from bedrock_bridge.adapters.settings import DEFAULT_MODEL, BedrockSettings
from bedrock_bridge.core.exceptions import EmptyResponseError, UnsupportedRoleError
from bedrock_bridge.core.types import CallOptions, ChatMessageType, ContentResponse, MessageContent


class FakeRuntime:
    def __init__(self, content: list[dict[str, Any]] | None = None) -> None:
        self.calls: list[dict[str, Any]] = []
        self._content = [{'text': 'pong'}] if content is None else content

    def converse(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(kwargs)
        return {
            'output': {'message': {'role': 'assistant', 'content': self._content}},
            'stopReason': 'end_turn',
            'usage': {'inputTokens': 1, 'outputTokens': 1, 'totalTokens': 2},
        }


class RecordingHandler:
    def __init__(self) -> None:
        self.events: list[str] = []

    def handle_llm_generate_content_start(self, messages: Any) -> None:  # noqa: ARG002
        self.events.append('start')

    def handle_llm_generate_content_end(self, response: ContentResponse) -> None:  # noqa: ARG002
        self.events.append('end')

    def handle_llm_error(self, error: Exception) -> None:
        self.events.append(f'error:{type(error).__name__}')


def test_call_single_prompt() -> None:
    runtime = FakeRuntime()
    adapter = BedrockChatAdapter('meta.llama3-8b-instruct-v1:0', client=runtime)

    assert adapter.call('ping') == 'pong'
    assert runtime.calls[0]['modelId'] == 'meta.llama3-8b-instruct-v1:0'
    assert runtime.calls[0]['messages'] == [{'role': 'user', 'content': [{'text': 'ping'}]}]


def test_options_model_overrides_adapter_model() -> None:
    runtime = FakeRuntime()
    adapter = BedrockChatAdapter('amazon.titan-text-lite-v1', client=runtime)

    adapter.generate_content(
        [MessageContent.from_text(ChatMessageType.human, 'hi')],
        CallOptions(model='amazon.titan-text-express-v1', max_tokens=10),
    )
    assert runtime.calls[0]['modelId'] == 'amazon.titan-text-express-v1'
    assert runtime.calls[0]['inferenceConfig']['maxTokens'] == 10


def test_callbacks_on_success() -> None:
    handler = RecordingHandler()
    adapter = BedrockChatAdapter('amazon.titan-text-lite-v1', client=FakeRuntime(), callbacks_handler=handler)

    adapter.call('hi')
    assert handler.events == ['start', 'end']


def test_callbacks_on_error() -> None:
    handler = RecordingHandler()
    runtime = FakeRuntime()
    adapter = BedrockChatAdapter('amazon.titan-text-lite-v1', client=runtime, callbacks_handler=handler)

    with pytest.raises(UnsupportedRoleError):
        adapter.generate_content([MessageContent.from_text(ChatMessageType.tool, 'result')])
    assert handler.events == ['start', 'error:UnsupportedRoleError']
    assert runtime.calls == []


def test_call_without_choices(monkeypatch: pytest.MonkeyPatch) -> None:
    adapter = BedrockChatAdapter('amazon.titan-text-lite-v1', client=FakeRuntime())
    monkeypatch.setattr(adapter, '_invoke', lambda *_: ContentResponse())

    with pytest.raises(EmptyResponseError):
        adapter.call('hi')


def test_model_defaults_to_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings_module, 'load_dotenv', lambda: False)
    monkeypatch.setenv('BEDROCK_MODEL_ID', 'mistral.mistral-7b-instruct-v0:2')

    adapter = BedrockChatAdapter(client=FakeRuntime())
    assert adapter.model == 'mistral.mistral-7b-instruct-v0:2'


def test_client_built_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    runtime = FakeRuntime()
    monkeypatch.setattr(BedrockSettings, 'make_client', lambda self: runtime)

    adapter = BedrockChatAdapter(settings=BedrockSettings(region_name='us-east-1'))
    assert adapter.model == DEFAULT_MODEL
    assert adapter.call('ping') == 'pong'
    assert len(runtime.calls) == 1
