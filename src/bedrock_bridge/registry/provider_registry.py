"""registry.provider_registry

Global registry that maps provider slugs (e.g. "bedrock") to their concrete
adapter classes (subclasses of AbstractLLMClient).

Built-in adapters are imported lazily on first lookup so that importing the
registry never pulls in boto3.
"""

from __future__ import annotations

import importlib
import threading
from types import MappingProxyType
from typing import TYPE_CHECKING

from bedrock_bridge.core.exceptions import ProviderNotFoundError

if TYPE_CHECKING:
    from collections.abc import Mapping, MutableMapping

    from bedrock_bridge.core.abc import AbstractLLMClient

# provider slug -> module that registers it on import
BUILTIN_ADAPTERS: Mapping[str, str] = MappingProxyType({
    'bedrock': 'bedrock_bridge.adapters.bedrock_adapter',
})


class _ThreadSafeSingleton(type):
    """Metaclass ensuring a single registry instance across threads."""

    _instance: ProviderRegistry | None = None
    _lock = threading.Lock()

    def __call__(cls, *args: object, **kwargs: object) -> ProviderRegistry:
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__call__(*args, **kwargs)
        return cls._instance


class ProviderRegistry(metaclass=_ThreadSafeSingleton):
    """Centralised look-up and registration for provider → adapter mappings.

    Usage (typically at the bottom of an adapter module):

    ```python
    provider_registry.register("bedrock", BedrockChatAdapter)
    ```
    """

    _registry: MutableMapping[str, type[AbstractLLMClient]]

    def __init__(self) -> None:  # pragma: no cover - called once via singleton
        self._registry = {}

    def register(self, provider_key: str, adapter_cls: type[AbstractLLMClient]) -> None:
        """Register adapter_cls under provider_key (normalised to lower-case)."""
        from bedrock_bridge.core.abc import AbstractLLMClient  # local import avoids cycles

        if not isinstance(adapter_cls, type) or not issubclass(adapter_cls, AbstractLLMClient):
            raise TypeError('adapter_cls must subclass AbstractLLMClient')
        self._registry[provider_key.lower()] = adapter_cls

    def get_adapter_cls(self, provider_key: str) -> type[AbstractLLMClient]:
        """Return the adapter class registered for provider_key.

        Raises
        ------
        ProviderNotFoundError
            If provider_key is neither registered nor a built-in provider.

        """
        key = provider_key.lower()
        if key not in self._registry and key in BUILTIN_ADAPTERS:
            importlib.import_module(BUILTIN_ADAPTERS[key])
        try:
            return self._registry[key]
        except KeyError as exc:
            raise ProviderNotFoundError(f'Unsupported provider: {provider_key}') from exc

    def available_providers(self) -> list[str]:
        """Return a sorted list of registered and built-in providers."""
        return sorted(set(self._registry) | set(BUILTIN_ADAPTERS))

    def mapping(self) -> Mapping[str, type[AbstractLLMClient]]:
        """Return a read-only view of the explicitly registered adapters."""
        return MappingProxyType(dict(self._registry))


# Re-export a module-level instance for ergonomic usage
provider_registry: ProviderRegistry = ProviderRegistry()
