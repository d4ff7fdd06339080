"""core.types

Provider-agnostic chat model: messages, content parts, call options and the
generic response shape.

These models live in the **core** layer so that *adapters*, *bedrockclient*,
*registry*, and higher application layers can depend on them without causing
circular imports.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Chat roles
# ---------------------------------------------------------------------------


class ChatMessageType(StrEnum):
    """Role of a message in a conversation.

    Only ``system``, ``human`` and ``ai`` can be sent to Bedrock; the remaining
    roles exist in the generic model and are rejected during translation.
    """

    system = 'system'
    human = 'human'
    ai = 'ai'
    generic = 'generic'
    tool = 'tool'
    function = 'function'


# ---------------------------------------------------------------------------
# Content parts
# ---------------------------------------------------------------------------


class TextContent(BaseModel):
    """Plain text content part."""

    type: Literal['text'] = 'text'
    text: str

    model_config = ConfigDict(frozen=True)


class BinaryContent(BaseModel):
    """Raw bytes tagged with a MIME type (images and documents)."""

    type: Literal['binary'] = 'binary'
    mime_type: str
    data: bytes
    filename: str = ''

    model_config = ConfigDict(frozen=True)


class ImageURLContent(BaseModel):
    """Image referenced by a ``data:`` URL."""

    type: Literal['image_url'] = 'image_url'
    url: str

    model_config = ConfigDict(frozen=True)


ContentPart = Annotated[TextContent | BinaryContent | ImageURLContent, Field(discriminator='type')]


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


class MessageContent(BaseModel):
    """Single chat message made of one or more content parts."""

    role: ChatMessageType
    parts: tuple[ContentPart, ...] = ()

    # Immutable value-object
    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_text(cls, role: ChatMessageType, *texts: str) -> MessageContent:
        """Build a message whose parts are all text."""
        return cls(role=role, parts=tuple(TextContent(text=t) for t in texts))


# ---------------------------------------------------------------------------
# Call options (provider-agnostic)
# ---------------------------------------------------------------------------


class CallOptions(BaseModel):
    """Options for a single generation call.

    Values are passed through to the provider as-is, except ``max_tokens``
    which falls back to a default when it is not positive.
    """

    model: str | None = Field(None, description='Model identifier; adapters fill in their own when unset')
    max_tokens: int = Field(0, description='Maximum tokens in completion, <= 0 means provider default')
    temperature: float = 0.0
    top_p: float = 0.0
    stop_words: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class ContentChoice(BaseModel):
    """One candidate returned by the model."""

    content: str
    stop_reason: str = ''
    generation_info: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class ContentResponse(BaseModel):
    """Generic response; Bedrock Converse always yields exactly one choice."""

    choices: tuple[ContentChoice, ...] = ()

    model_config = ConfigDict(frozen=True)
