"""Validation helpers for uploaded scrap photos."""

import base64
import re
from typing import Optional

from fastapi import UploadFile

from models.scrap_models import UploadedImage

DATA_URI_PATTERN = re.compile(r"^data:(image/[a-zA-Z0-9.+-]+);base64,")


def to_data_uri(raw: bytes, content_type: Optional[str]) -> str:
    """Encode raw upload bytes as a data URI using the browser-supplied content type."""
    mime_type = (content_type or "application/octet-stream").split(";", 1)[0].strip().lower()
    return f"data:{mime_type};base64,{base64.b64encode(raw).decode('ascii')}"


def parse_image_data_uri(data_uri: str, filename: Optional[str] = None) -> UploadedImage:
    """Split an image data URI into its MIME type and base64 payload.

    Raises:
        ValueError: If the URI is not a base64 ``image/*`` data URI or has no payload.
    """
    match = DATA_URI_PATTERN.match(data_uri)
    if not match:
        raise ValueError("Please choose an image file (JPG, PNG, WEBP...).")
    payload = data_uri[match.end():]
    if not payload:
        raise ValueError("Uploaded image is empty.")
    return UploadedImage(data_b64=payload, mime_type=match.group(1), filename=filename)


async def read_image_upload(upload: UploadFile) -> UploadedImage:
    """Read an uploaded file and return it as an ``UploadedImage``.

    Raises:
        ValueError: If the upload is empty or is not an image.
    """
    raw = await upload.read()
    if not raw:
        raise ValueError("Uploaded image is empty.")
    return parse_image_data_uri(to_data_uri(raw, upload.content_type), filename=upload.filename)
