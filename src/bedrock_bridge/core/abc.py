"""core.abc

Abstract base class that *all* provider adapters must implement.

Design goals
============
1. **Provider-agnostic public API** - callers interact exclusively via
    `generate_content()` / `call()` passing domain models (`MessageContent`,
    `CallOptions`). They never touch provider-specific payloads.
2. **Observable** - every generation fires the optional callback handler
    (start, then end or error) so applications can trace calls without
    wrapping adapters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from bedrock_bridge.core.exceptions import EmptyResponseError
from bedrock_bridge.core.types import CallOptions, ChatMessageType, MessageContent

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bedrock_bridge.core.callbacks import CallbackHandler
    from bedrock_bridge.core.types import ContentResponse


class AbstractLLMClient(ABC):
    """Provider-independent LLM client interface."""

    # ---------------------------------------------------------------------
    # Construction
    # ---------------------------------------------------------------------

    def __init__(
        self,
        model: str,
        *,
        callbacks_handler: CallbackHandler | None = None,
    ) -> None:
        """Store *model* name and optional callback handler."""
        self._model: str = model
        self.callbacks_handler: CallbackHandler | None = callbacks_handler

    @property
    def model(self) -> str:
        return self._model

    # ------------------------------------------------------------------
    # Public synchronous API
    # ------------------------------------------------------------------

    def generate_content(
        self,
        messages: Sequence[MessageContent],
        options: CallOptions | None = None,
    ) -> ContentResponse:
        """Generate a completion synchronously.

        Subclasses **must not** override this - override `_invoke()` instead.
        """
        handler = self.callbacks_handler
        if handler is not None:
            handler.handle_llm_generate_content_start(messages)

        opts = options or CallOptions()
        if opts.model is None:
            opts = opts.model_copy(update={'model': self._model})

        try:
            response = self._invoke(messages, opts)
        except Exception as exc:
            if handler is not None:
                handler.handle_llm_error(exc)
            raise

        if handler is not None:
            handler.handle_llm_generate_content_end(response)
        return response

    def call(self, prompt: str, options: CallOptions | None = None) -> str:
        """Send a single human prompt and return the text of the first choice."""
        response = self.generate_content([MessageContent.from_text(ChatMessageType.human, prompt)], options)
        if not response.choices:
            raise EmptyResponseError('empty response')
        return response.choices[0].content

    # ------------------------------------------------------------------
    # Methods to implement in concrete adapters
    # ------------------------------------------------------------------

    @abstractmethod
    def _invoke(self, messages: Sequence[MessageContent], options: CallOptions) -> ContentResponse:
        """Provider-specific **blocking** implementation (to be overridden)."""

    # ------------------------------------------------------------------
    # Helper - string representation
    # ------------------------------------------------------------------

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f'<{self.__class__.__name__} model={self._model!r}>'
