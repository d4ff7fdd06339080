from __future__ import annotations

import pydantic
import pytest

from bedrock_bridge.core.types import (
    BinaryContent,
    CallOptions,
    ChatMessageType,
    ImageURLContent,
    MessageContent,
    TextContent,
)


def test_from_text_builds_text_parts() -> None:
    msg = MessageContent.from_text(ChatMessageType.human, 'a', 'b')
    assert msg.role is ChatMessageType.human
    assert msg.parts == (TextContent(text='a'), TextContent(text='b'))


def test_parts_are_parsed_by_discriminator() -> None:
    msg = MessageContent.model_validate(
        {
            'role': 'human',
            'parts': [
                {'type': 'text', 'text': 'hi'},
                {'type': 'binary', 'mime_type': 'image/png', 'data': b'\x89PNG'},
                {'type': 'image_url', 'url': 'data:image/png;base64,AA=='},
            ],
        },
    )
    assert [type(p) for p in msg.parts] == [TextContent, BinaryContent, ImageURLContent]


def test_messages_are_immutable() -> None:
    msg = MessageContent.from_text(ChatMessageType.ai, 'done')
    with pytest.raises(pydantic.ValidationError):
        msg.role = ChatMessageType.human  # type: ignore[misc]


def test_unknown_role_is_rejected_by_model() -> None:
    with pytest.raises(pydantic.ValidationError):
        MessageContent(role='narrator', parts=())  # type: ignore[arg-type]


def test_call_options_defaults() -> None:
    opts = CallOptions()
    assert opts.model is None
    assert opts.max_tokens == 0
    assert opts.temperature == 0.0
    assert opts.top_p == 0.0
    assert opts.stop_words == ()
