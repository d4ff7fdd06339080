"""bedrockclient.assembler

Flattens a Bedrock Converse response into a generic `ContentResponse`.

Unlike the request path, unknown content blocks are skipped rather than
rejected: the model may return block kinds (reasoning, citations, …) that this
bridge does not render.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from bedrock_bridge.core.exceptions import UnexpectedOutputError
from bedrock_bridge.core.types import ContentChoice, ContentResponse

logger = logging.getLogger(__name__)

CONTENT_SEPARATOR = '\n'


def assemble_response(output: Mapping[str, Any]) -> ContentResponse:
    """Build the single-choice response for a ``converse`` result.

    Raises
    ------
    UnexpectedOutputError
        If the output is not the ``message`` variant.

    """
    message = _output_message(output)

    parts: list[str] = []
    for block in message.get('content') or ():
        if 'text' in block:
            parts.append(block['text'])
        elif 'image' in block:
            source = block['image'].get('source') or {}
            if 'bytes' in source:
                # Image data is returned as text, which is lossy for real images.
                logger.warning('Flattening %d byte(s) of image output into text', len(source['bytes']))
                parts.append(source['bytes'].decode('utf-8', errors='surrogateescape'))
        else:
            logger.debug('Skipping unsupported output block: %s', sorted(block))

    usage = output.get('usage') or {}
    return ContentResponse(
        choices=(
            ContentChoice(
                content=CONTENT_SEPARATOR.join(parts),
                stop_reason=output.get('stopReason', ''),
                generation_info={
                    'input_tokens': usage.get('inputTokens'),
                    'output_tokens': usage.get('outputTokens'),
                },
            ),
        ),
    )


def _output_message(output: Mapping[str, Any]) -> Mapping[str, Any]:
    variant = output.get('output')
    if not isinstance(variant, Mapping):
        raise UnexpectedOutputError(f'unexpected output type: {type(variant).__name__}')

    message = variant.get('message')
    if not isinstance(message, Mapping):
        raise UnexpectedOutputError(f'unexpected output type: {sorted(variant)}')
    return message
