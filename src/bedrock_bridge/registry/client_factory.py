"""registry.client_factory

Factory responsible for converting a ModelId (or raw string) into a fully
initialized adapter instance (subclass of AbstractLLMClient).

Identifiers without a provider prefix are treated as Bedrock model ids, so
``"anthropic.claude-3-haiku-20240307-v1:0"``, ``"bedrock:anthropic.claude-3-haiku-20240307-v1:0"``
and inference-profile ARNs all resolve to the Bedrock adapter.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, overload

from bedrock_bridge.core.model_id import ModelId, parse_model_id
from bedrock_bridge.registry.provider_registry import provider_registry

if TYPE_CHECKING:
    from bedrock_bridge.core.abc import AbstractLLMClient

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER = 'bedrock'


class LLMClientFactory:
    """Factory for creating provider-specific LLM clients.

    This class is stateless; all information resides in provider_registry.
    """

    @staticmethod
    @overload
    def initialize_client(model_id: str, **adapter_kwargs: object) -> AbstractLLMClient: ...

    @staticmethod
    @overload
    def initialize_client(model_id: ModelId, **adapter_kwargs: object) -> AbstractLLMClient: ...

    @staticmethod
    def initialize_client(model_id: str | ModelId, **adapter_kwargs: object) -> AbstractLLMClient:
        """Return a concrete adapter for model_id.

        Parameters
        ----------
        model_id
            A raw string (``"provider:model"``, a bare Bedrock model id, or an
            ARN) or a pre-parsed ModelId instance. The model part reaches the
            adapter verbatim.
        **adapter_kwargs
            Keyword arguments forwarded to the adapter's constructor, e.g. a
            pre-built ``client`` or a ``callbacks_handler``.

        """
        if isinstance(model_id, str):
            model_identifier = parse_model_id(model_id, default_provider=DEFAULT_PROVIDER)
        else:
            model_identifier = model_id

        adapter_class = provider_registry.get_adapter_cls(model_identifier.provider)
        logger.debug(
            'Initializing %s for %s (arn=%s)',
            adapter_class.__name__,
            model_identifier.model,
            model_identifier.is_arn,
        )
        return adapter_class(model=model_identifier.model, **adapter_kwargs)
