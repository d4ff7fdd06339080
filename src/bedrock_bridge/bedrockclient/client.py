"""bedrockclient.client

Thin wrapper around a ``bedrock-runtime`` client: translate, call ``converse``
once, assemble.

No retry or timeout happens here. Those belong to the botocore client
configuration, and transport errors reach the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

from bedrock_bridge.bedrockclient.assembler import assemble_response
from bedrock_bridge.bedrockclient.translator import build_converse_request

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bedrock_bridge.core.types import CallOptions, ContentResponse, MessageContent

logger = logging.getLogger(__name__)


class ConverseTransport(Protocol):
    """The subset of the boto3 ``bedrock-runtime`` client used here."""

    def converse(self, **kwargs: Any) -> dict[str, Any]: ...


class BedrockClient:
    """Sends generic messages to Bedrock through the Converse API."""

    def __init__(self, client: ConverseTransport) -> None:
        self._client = client

    def create_completion(
        self,
        model_id: str,
        messages: Sequence[MessageContent],
        options: CallOptions,
    ) -> ContentResponse:
        """Send *messages* to *model_id* and return the flattened response.

        Parameters
        ----------
        model_id
            Bedrock model identifier or inference profile ARN.
        messages
            Conversation in the generic format; at most one system message.
        options
            Sampling options. ``max_tokens <= 0`` falls back to 512.

        Raises
        ------
        TranslationError
            If any message cannot be represented; nothing is sent.
        UnexpectedOutputError
            If the response is not a message.

        """
        request = build_converse_request(model_id, messages, options)

        logger.debug('Calling converse on %s with %d message(s)', model_id, len(request.messages))
        output = self._client.converse(**request.to_boto())

        return assemble_response(output)
