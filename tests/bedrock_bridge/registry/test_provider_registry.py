from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from bedrock_bridge.core.abc import AbstractLLMClient
from bedrock_bridge.core.exceptions import ProviderNotFoundError
from bedrock_bridge.core.types import ContentChoice, ContentResponse
from bedrock_bridge.registry.provider_registry import ProviderRegistry

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bedrock_bridge.core.types import CallOptions, MessageContent


class DummyAdapter(AbstractLLMClient):
    def _invoke(self, messages: Sequence[MessageContent], options: CallOptions) -> ContentResponse:  # noqa: ARG002
        return ContentResponse(choices=(ContentChoice(content='dummy'),))


def test_register_and_fetch() -> None:
    reg = ProviderRegistry()
    reg.register('Dummy', DummyAdapter)
    assert 'dummy' in reg.available_providers()
    assert reg.get_adapter_cls('dummy') is DummyAdapter


def test_registry_is_singleton() -> None:
    assert ProviderRegistry() is ProviderRegistry()


def test_register_type_validation() -> None:
    reg = ProviderRegistry()
    with pytest.raises(TypeError):
        reg.register('bad', object)  # type: ignore[arg-type]


def test_unknown_provider() -> None:
    reg = ProviderRegistry()
    with pytest.raises(ProviderNotFoundError):
        reg.get_adapter_cls('no-such')


def test_builtin_bedrock_is_loaded_lazily() -> None:
    reg = ProviderRegistry()
    assert 'bedrock' in reg.available_providers()

    from bedrock_bridge.adapters.bedrock_adapter import BedrockChatAdapter

    assert reg.get_adapter_cls('BEDROCK') is BedrockChatAdapter
