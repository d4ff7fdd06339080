"""bedrockclient.formats

MIME type → Converse format resolution.

Both tables are read-only and built once at import time. A MIME type that is
not listed is always an error; there is no fallback format.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING

from bedrock_bridge.core.exceptions import UnsupportedMimeTypeError

if TYPE_CHECKING:
    from collections.abc import Mapping


class ImageFormat(StrEnum):
    png = 'png'
    jpeg = 'jpeg'
    gif = 'gif'
    webp = 'webp'


class DocumentFormat(StrEnum):
    pdf = 'pdf'
    csv = 'csv'
    doc = 'doc'
    docx = 'docx'
    xls = 'xls'
    xlsx = 'xlsx'
    html = 'html'
    txt = 'txt'
    md = 'md'


IMAGE_FORMATS: Mapping[str, ImageFormat] = MappingProxyType({
    'image/png': ImageFormat.png,
    'image/jpeg': ImageFormat.jpeg,
    'image/gif': ImageFormat.gif,
    'image/webp': ImageFormat.webp,
})

DOCUMENT_FORMATS: Mapping[str, DocumentFormat] = MappingProxyType({
    'application/pdf': DocumentFormat.pdf,
    'text/csv': DocumentFormat.csv,
    'application/msword': DocumentFormat.doc,
    'application/vnd.openxmlformats-officedocument.wordprocessingml.document': DocumentFormat.docx,
    'application/vnd.ms-excel': DocumentFormat.xls,
    'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet': DocumentFormat.xlsx,
    'text/html': DocumentFormat.html,
    'text/plain': DocumentFormat.txt,
    'text/markdown': DocumentFormat.md,
})


def resolve_image_format(mime_type: str) -> ImageFormat:
    """Return the image format for *mime_type*.

    Raises
    ------
    UnsupportedMimeTypeError
        If *mime_type* is not a supported image type.

    """
    try:
        return IMAGE_FORMATS[mime_type]
    except KeyError as exc:
        raise UnsupportedMimeTypeError(mime_type) from exc


def resolve_document_format(mime_type: str) -> DocumentFormat:
    """Return the document format for *mime_type*.

    Raises
    ------
    UnsupportedMimeTypeError
        If *mime_type* is not a supported document type.

    """
    try:
        return DOCUMENT_FORMATS[mime_type]
    except KeyError as exc:
        raise UnsupportedMimeTypeError(mime_type) from exc
