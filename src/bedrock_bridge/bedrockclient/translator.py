"""bedrockclient.translator

Converts generic chat messages into a Bedrock Converse request.

Translation is all-or-nothing: the first message or content part that cannot
be represented raises a `TranslationError` subclass and no request is built.
"""

from __future__ import annotations

import base64
import logging
from typing import TYPE_CHECKING

from bedrock_bridge.bedrockclient.formats import resolve_document_format, resolve_image_format
from bedrock_bridge.bedrockclient.wire import (
    INT32_MAX,
    ConversationRole,
    ConverseRequest,
    DocumentBlock,
    ImageBlock,
    InferenceConfiguration,
    TextBlock,
    WireContentBlock,
    WireMessage,
)
from bedrock_bridge.core.exceptions import (
    ImageURLError,
    InferenceConfigError,
    MultipleSystemMessagesError,
    SystemMessageTypeError,
    UnsupportedContentTypeError,
    UnsupportedMimeTypeError,
    UnsupportedRoleError,
)
from bedrock_bridge.core.types import (
    BinaryContent,
    CallOptions,
    ChatMessageType,
    ContentPart,
    ImageURLContent,
    MessageContent,
    TextContent,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

DEFAULT_MAX_TOKENS = 512

_DATA_PREFIX = 'data:'
_BASE64_PREFIX = 'base64,'

_ROLES: dict[ChatMessageType, ConversationRole] = {
    ChatMessageType.human: ConversationRole.user,
    ChatMessageType.ai: ConversationRole.assistant,
}


def build_converse_request(
    model_id: str,
    messages: Sequence[MessageContent],
    options: CallOptions,
) -> ConverseRequest:
    """Translate *messages* and *options* into a `ConverseRequest`.

    System messages are carried in the request's ``system`` field; every other
    message becomes one wire message, in the original order.
    """
    system_messages: list[MessageContent] = []
    other_messages: list[MessageContent] = []
    for message in messages:
        if message.role == ChatMessageType.system:
            system_messages.append(message)
        else:
            other_messages.append(message)

    system = process_system_messages(system_messages)
    wire_messages = process_messages(other_messages)

    logger.debug(
        'Translated %d message(s) for %s (system preamble: %s)',
        len(wire_messages),
        model_id,
        system is not None,
    )
    return ConverseRequest(
        model_id=model_id,
        messages=wire_messages,
        inference_config=InferenceConfiguration(
            max_tokens=get_max_tokens(options.max_tokens, DEFAULT_MAX_TOKENS),
            top_p=options.top_p,
            temperature=options.temperature,
            stop_sequences=options.stop_words,
        ),
        system=system,
    )


def process_system_messages(messages: Sequence[MessageContent]) -> tuple[TextBlock, ...] | None:
    """Return the system preamble, or ``None`` when there is no system message."""
    if not messages:
        return None

    if len(messages) > 1:
        raise MultipleSystemMessagesError(f'expected at most one system message, got {len(messages)}')

    parts = messages[0].parts
    if len(parts) != 1:
        raise SystemMessageTypeError(f'expected system message to have a single text part, got {len(parts)} parts')
    if not isinstance(parts[0], TextContent):
        raise SystemMessageTypeError(f'expected system message to be TextContent, got {type(parts[0]).__name__}')

    return (TextBlock(text=parts[0].text),)


def process_messages(messages: Sequence[MessageContent]) -> tuple[WireMessage, ...]:
    return tuple(
        WireMessage(
            role=role_to_bedrock_role(message.role),
            content=tuple(content_part_to_block(part) for part in message.parts),
        )
        for message in messages
    )


def role_to_bedrock_role(role: ChatMessageType) -> ConversationRole:
    try:
        return _ROLES[role]
    except KeyError as exc:
        raise UnsupportedRoleError(str(role)) from exc


def content_part_to_block(part: ContentPart) -> WireContentBlock:
    """Dispatch one content part to its wire block."""
    match part:
        case TextContent():
            return TextBlock(text=part.text)
        case BinaryContent():
            return binary_content_to_block(part)
        case ImageURLContent():
            return image_url_content_to_block(part)
    raise UnsupportedContentTypeError(f'unsupported content type: {type(part).__name__}')


def binary_content_to_block(part: BinaryContent) -> ImageBlock | DocumentBlock:
    """Build an image block if the MIME type is an image, else a document block."""
    try:
        return ImageBlock(format=resolve_image_format(part.mime_type), source_bytes=part.data)
    except UnsupportedMimeTypeError:
        pass

    try:
        document_format = resolve_document_format(part.mime_type)
    except UnsupportedMimeTypeError as exc:
        raise UnsupportedMimeTypeError(
            part.mime_type,
            f'unsupported content type: {part.mime_type}',
        ) from exc
    return DocumentBlock(name=part.filename, format=document_format, source_bytes=part.data)


def image_url_content_to_block(part: ImageURLContent) -> ImageBlock:
    """Decode a ``data:<mime>;[base64,]<payload>`` URL into an image block.

    The payload is base64-decoded when it carries the ``base64,`` marker and
    used verbatim otherwise. Only image MIME types are accepted.
    """
    segments = part.url.split(';')
    if len(segments) != 2:  # noqa: PLR2004
        raise ImageURLError(f'unsupported image url: {part.url}')

    header, payload = segments
    if not header.startswith(_DATA_PREFIX):
        raise ImageURLError(f'unsupported image url: {part.url}')

    image_format = resolve_image_format(header.removeprefix(_DATA_PREFIX))

    if payload.startswith(_BASE64_PREFIX):
        try:
            data = base64.b64decode(payload.removeprefix(_BASE64_PREFIX), validate=True)
        except ValueError as exc:  # binascii.Error or non-ASCII input
            raise ImageURLError(f'invalid base64 payload in image url: {exc}') from exc
    else:
        data = payload.encode()

    return ImageBlock(format=image_format, source_bytes=data)


def get_max_tokens(max_tokens: int, default: int) -> int:
    """Return *max_tokens*, or *default* when it is not positive.

    Raises
    ------
    InferenceConfigError
        If *max_tokens* does not fit the protocol's int32 field.

    """
    if max_tokens <= 0:
        return default
    if max_tokens > INT32_MAX:
        raise InferenceConfigError(f'max tokens out of range: {max_tokens}')
    return max_tokens
