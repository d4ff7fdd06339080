import pytest

from bedrock_bridge.bedrockclient.formats import (
    DOCUMENT_FORMATS,
    IMAGE_FORMATS,
    DocumentFormat,
    ImageFormat,
    resolve_document_format,
    resolve_image_format,
)
from bedrock_bridge.core.exceptions import UnsupportedMimeTypeError


def test_tables_are_disjoint() -> None:
    assert not set(IMAGE_FORMATS) & set(DOCUMENT_FORMATS)


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        IMAGE_FORMATS['image/tiff'] = ImageFormat.png  # type: ignore[index]


def test_resolve_known_types() -> None:
    assert resolve_image_format('image/jpeg') is ImageFormat.jpeg
    assert resolve_document_format('text/markdown') is DocumentFormat.md
    assert (
        resolve_document_format('application/vnd.openxmlformats-officedocument.spreadsheetml.sheet')
        is DocumentFormat.xlsx
    )


@pytest.mark.parametrize('mime_type', ['image/tiff', 'application/pdf', 'IMAGE/PNG', ''])
def test_resolve_image_rejects_unknown(mime_type: str) -> None:
    with pytest.raises(UnsupportedMimeTypeError) as exc_info:
        resolve_image_format(mime_type)
    assert exc_info.value.mime_type == mime_type


@pytest.mark.parametrize('mime_type', ['image/png', 'application/zip', 'text/xml'])
def test_resolve_document_rejects_unknown(mime_type: str) -> None:
    with pytest.raises(UnsupportedMimeTypeError):
        resolve_document_format(mime_type)
