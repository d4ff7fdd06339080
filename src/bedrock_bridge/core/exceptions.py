"""core.exceptions

Centralised exception hierarchy for *bedrock_bridge*.

Each error carries an `http_status` attribute so that upper layers (REST API
controllers, FastAPI exception handlers, etc.) can translate exceptions to
appropriate HTTP responses *without* scattering status-code logic throughout
business code.

Transport failures raised by botocore are **not** part of this hierarchy; they
reach the caller unchanged.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Mapping


# ---------------------------------------------------------------------------
# Base class with HTTP status information
# ---------------------------------------------------------------------------


class BedrockBridgeError(Exception):
    """Base class for all *bedrock_bridge* domain errors."""

    #: Default HTTP status if not overridden by subclass.
    http_status: ClassVar[HTTPStatus] = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.__class__.__name__)

    def to_json(self) -> dict[str, dict[str, str]]:
        """Unified error body."""
        return {'error': {'type': self.__class__.__name__, 'message': str(self)}}


# ---------------------------------------------------------------------------
# Request path: translation of generic messages into a Converse request
# ---------------------------------------------------------------------------


class TranslationError(BedrockBridgeError):
    """A message or content part cannot be represented on the wire."""

    http_status: ClassVar[HTTPStatus] = HTTPStatus.BAD_REQUEST  # 400


class MultipleSystemMessagesError(TranslationError):
    """Raised when more than one system message is supplied."""


class SystemMessageTypeError(TranslationError):
    """Raised when the system message is not a single text part."""


class UnsupportedRoleError(TranslationError):
    """Raised for a role that has no Converse counterpart."""

    def __init__(self, role: str) -> None:
        super().__init__(f'unsupported role: {role}')
        self.role = role


class UnsupportedContentTypeError(TranslationError):
    """Raised for a content part variant the translator does not know."""


class ImageURLError(TranslationError):
    """Raised for an image URL that is not a well-formed ``data:`` URL."""


class InferenceConfigError(TranslationError):
    """Raised when call options cannot be expressed as Converse inference parameters."""


class UnsupportedMimeTypeError(TranslationError):
    """Raised when a MIME type resolves to neither an image nor a document format."""

    http_status: ClassVar[HTTPStatus] = HTTPStatus.UNSUPPORTED_MEDIA_TYPE  # 415

    def __init__(self, mime_type: str, message: str | None = None) -> None:
        super().__init__(message or f'unsupported mime type: {mime_type}')
        self.mime_type = mime_type


# ---------------------------------------------------------------------------
# Response path
# ---------------------------------------------------------------------------


class UnexpectedOutputError(BedrockBridgeError):
    """Raised when the Converse output is not the documented message variant."""

    http_status: ClassVar[HTTPStatus] = HTTPStatus.BAD_GATEWAY  # 502


class EmptyResponseError(BedrockBridgeError):
    """Raised when a response carries no choices to return to the caller."""

    http_status: ClassVar[HTTPStatus] = HTTPStatus.BAD_GATEWAY  # 502


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class ProviderNotFoundError(BedrockBridgeError):
    """Raised when `ProviderRegistry` cannot find a requested provider key."""

    http_status: ClassVar[HTTPStatus] = HTTPStatus.NOT_IMPLEMENTED  # 501


HTTP_STATUS_MAP: Mapping[type[BedrockBridgeError], HTTPStatus] = {
    TranslationError: TranslationError.http_status,
    MultipleSystemMessagesError: MultipleSystemMessagesError.http_status,
    SystemMessageTypeError: SystemMessageTypeError.http_status,
    UnsupportedRoleError: UnsupportedRoleError.http_status,
    UnsupportedContentTypeError: UnsupportedContentTypeError.http_status,
    ImageURLError: ImageURLError.http_status,
    InferenceConfigError: InferenceConfigError.http_status,
    UnsupportedMimeTypeError: UnsupportedMimeTypeError.http_status,
    UnexpectedOutputError: UnexpectedOutputError.http_status,
    EmptyResponseError: EmptyResponseError.http_status,
    ProviderNotFoundError: ProviderNotFoundError.http_status,
}
