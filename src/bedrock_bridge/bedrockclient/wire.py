"""bedrockclient.wire

Typed mirror of the Bedrock Converse request.

The models are built by the translator and rendered with `to_boto()` into the
exact keyword arguments accepted by ``bedrock-runtime``'s ``converse`` call.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from bedrock_bridge.bedrockclient.formats import DocumentFormat, ImageFormat  # noqa: TC001

INT32_MAX = 2**31 - 1


class ConversationRole(StrEnum):
    user = 'user'
    assistant = 'assistant'


# ---------------------------------------------------------------------------
# Content blocks
# ---------------------------------------------------------------------------


class TextBlock(BaseModel):
    text: str

    model_config = ConfigDict(frozen=True)

    def to_boto(self) -> dict[str, Any]:
        return {'text': self.text}


class ImageBlock(BaseModel):
    format: ImageFormat
    source_bytes: bytes

    model_config = ConfigDict(frozen=True)

    def to_boto(self) -> dict[str, Any]:
        return {'image': {'format': self.format.value, 'source': {'bytes': self.source_bytes}}}


class DocumentBlock(BaseModel):
    name: str
    format: DocumentFormat
    source_bytes: bytes

    model_config = ConfigDict(frozen=True)

    def to_boto(self) -> dict[str, Any]:
        return {
            'document': {
                'name': self.name,
                'format': self.format.value,
                'source': {'bytes': self.source_bytes},
            },
        }


WireContentBlock = TextBlock | ImageBlock | DocumentBlock


# ---------------------------------------------------------------------------
# Messages and request
# ---------------------------------------------------------------------------


class WireMessage(BaseModel):
    role: ConversationRole
    content: tuple[WireContentBlock, ...]

    model_config = ConfigDict(frozen=True)

    def to_boto(self) -> dict[str, Any]:
        return {'role': self.role.value, 'content': [block.to_boto() for block in self.content]}


class InferenceConfiguration(BaseModel):
    """Sampling parameters sent with every request."""

    max_tokens: int = Field(..., ge=1, le=INT32_MAX)
    top_p: float
    temperature: float
    stop_sequences: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)

    def to_boto(self) -> dict[str, Any]:
        return {
            'maxTokens': self.max_tokens,
            'topP': self.top_p,
            'temperature': self.temperature,
            'stopSequences': list(self.stop_sequences),
        }


class ConverseRequest(BaseModel):
    """Complete Converse request; `system` is ``None`` when there is no preamble."""

    model_id: str
    messages: tuple[WireMessage, ...]
    inference_config: InferenceConfiguration
    system: tuple[TextBlock, ...] | None = None

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    def to_boto(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            'modelId': self.model_id,
            'messages': [message.to_boto() for message in self.messages],
            'inferenceConfig': self.inference_config.to_boto(),
        }
        if self.system is not None:
            kwargs['system'] = [block.to_boto() for block in self.system]
        return kwargs
