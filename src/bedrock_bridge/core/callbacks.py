"""core.callbacks

Hooks fired around a generation call by adapters that accept a
``callbacks_handler``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bedrock_bridge.core.types import ContentResponse, MessageContent

logger = logging.getLogger(__name__)


class CallbackHandler(Protocol):
    """Receives lifecycle events of `generate_content()`."""

    def handle_llm_generate_content_start(self, messages: Sequence[MessageContent]) -> None: ...

    def handle_llm_generate_content_end(self, response: ContentResponse) -> None: ...

    def handle_llm_error(self, error: Exception) -> None: ...


class LoggingCallbackHandler:
    """Callback handler that reports every event through `logging`."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def handle_llm_generate_content_start(self, messages: Sequence[MessageContent]) -> None:
        self._log.info('Generating content for %d message(s)', len(messages))

    def handle_llm_generate_content_end(self, response: ContentResponse) -> None:
        for choice in response.choices:
            self._log.info(
                'Generation finished: stop_reason=%s info=%s',
                choice.stop_reason,
                choice.generation_info,
            )

    def handle_llm_error(self, error: Exception) -> None:
        self._log.error('Generation failed: %s', error)
