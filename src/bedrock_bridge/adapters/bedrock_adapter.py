"""adapters.bedrock_adapter

Concrete adapter that bridges :class:`bedrock_bridge.core.abc.AbstractLLMClient`
with the **Amazon Bedrock Converse** API.

Credentials and region come from the usual boto3 chain, optionally seeded from
a ``.env`` file (see :class:`~bedrock_bridge.adapters.settings.BedrockSettings`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bedrock_bridge.adapters.settings import DEFAULT_MODEL, BedrockSettings
from bedrock_bridge.bedrockclient.client import BedrockClient
from bedrock_bridge.core.abc import AbstractLLMClient
from bedrock_bridge.registry.provider_registry import provider_registry

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bedrock_bridge.bedrockclient.client import ConverseTransport
    from bedrock_bridge.core.callbacks import CallbackHandler
    from bedrock_bridge.core.types import CallOptions, ContentResponse, MessageContent

# ---------------------------------------------------------------------------
# Adapter implementation
# ---------------------------------------------------------------------------


class BedrockChatAdapter(AbstractLLMClient):
    """Adapter for the Bedrock Converse API."""

    def __init__(
        self,
        model: str | None = None,
        *,
        client: ConverseTransport | None = None,
        callbacks_handler: CallbackHandler | None = None,
        settings: BedrockSettings | None = None,
    ) -> None:
        if client is None or model is None:
            settings = settings or BedrockSettings.from_env()
        super().__init__(model or settings.model_id, callbacks_handler=callbacks_handler)
        self._client = BedrockClient(client if client is not None else settings.make_client())

    # ------------------------------------------------------------------
    # Synchronous path
    # ------------------------------------------------------------------

    def _invoke(self, messages: Sequence[MessageContent], options: CallOptions) -> ContentResponse:
        return self._client.create_completion(options.model or self._model, messages, options)


# ---------------------------------------------------------------------------
# Automatic registration
# ---------------------------------------------------------------------------

provider_registry.register('bedrock', BedrockChatAdapter)

__all__ = ['DEFAULT_MODEL', 'BedrockChatAdapter']
