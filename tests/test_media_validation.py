"""Tests for upload parsing and preview generation."""

import base64
import io

import pytest
from fastapi import UploadFile
from PIL import Image

from services.preview_generator import PreviewGenerator
from utils.media_validation import parse_image_data_uri, read_image_upload, to_data_uri

pytestmark = [pytest.mark.fast]


def test_to_data_uri_normalises_content_type():
    assert to_data_uri(b"abc", "Image/PNG; charset=binary") == "data:image/png;base64,YWJj"


@pytest.mark.parametrize("mime_type", ["image/jpeg", "image/webp", "image/svg+xml", "image/x-icon", "image/vnd.microsoft.icon"])
def test_parse_accepts_image_types(mime_type):
    image = parse_image_data_uri(f"data:{mime_type};base64,QUJD", filename="x")

    assert image.mime_type == mime_type
    assert image.data_b64 == "QUJD"
    assert image.data_uri == f"data:{mime_type};base64,QUJD"


@pytest.mark.parametrize(
    "data_uri",
    ["data:text/plain;base64,QUJD", "data:image/png,QUJD", "image/png;base64,QUJD", "data:application/pdf;base64,JVBE"],
)
def test_parse_rejects_non_image_uris(data_uri):
    with pytest.raises(ValueError, match="Please choose an image file"):
        parse_image_data_uri(data_uri)


def test_parse_rejects_empty_payload():
    with pytest.raises(ValueError, match="empty"):
        parse_image_data_uri("data:image/png;base64,")


@pytest.mark.asyncio
async def test_read_image_upload(png_bytes, png_b64):
    upload = UploadFile(file=io.BytesIO(png_bytes), filename="scrap.png", headers={"content-type": "image/png"})

    image = await read_image_upload(upload)

    assert image.mime_type == "image/png"
    assert image.data_b64 == png_b64
    assert image.filename == "scrap.png"


@pytest.mark.asyncio
async def test_read_image_upload_rejects_empty_file():
    upload = UploadFile(file=io.BytesIO(b""), filename="empty.png", headers={"content-type": "image/png"})

    with pytest.raises(ValueError, match="empty"):
        await read_image_upload(upload)


def test_preview_fits_within_max_size():
    buf = io.BytesIO()
    Image.new("RGBA", (1200, 600), (10, 200, 10, 128)).save(buf, format="PNG")

    uri = PreviewGenerator(max_size=(480, 480)).create_preview_from_base64(base64.b64encode(buf.getvalue()))

    assert uri.startswith("data:image/png;base64,")
    preview = Image.open(io.BytesIO(base64.b64decode(uri.split(",", 1)[1])))
    assert preview.size == (480, 240)
    assert preview.mode == "RGB"


def test_preview_rejects_invalid_base64():
    with pytest.raises(ValueError, match="Invalid base64"):
        PreviewGenerator().create_preview_from_base64("***not base64***")


def test_preview_rejects_non_image_bytes():
    with pytest.raises(ValueError, match="not a supported image"):
        PreviewGenerator().create_preview_from_base64(base64.b64encode(b"plain text, not pixels"))
