"""Preview generator service.

Checks that an uploaded scrap photo really decodes as an image and shrinks a
copy for the identifier panel. Transparent areas are flattened onto a solid
background so the preview looks the same on any page colour.

Example:
    preview_uri = PreviewGenerator().create_preview_from_base64(image.data_b64)
"""
from __future__ import annotations

import base64
import binascii
import io
from typing import Tuple

from PIL import Image, UnidentifiedImageError

PREVIEW_MIME_TYPE = "image/png"


class PreviewGenerator:
    """Build small PNG previews for the scrap identifier.

    Args:
        max_size: Bounding box the preview must fit in. Defaults to (480, 480).
        background: RGB colour behind transparent pixels. Defaults to white.
    """

    def __init__(self, max_size: Tuple[int, int] = (480, 480), background: Tuple[int, int, int] | None = None):
        if min(max_size) < 1:
            raise ValueError("max_size must be positive.")
        self.max_size = max_size
        self.background = background or (255, 255, 255)

    @staticmethod
    def decode(data: str | bytes) -> Image.Image:
        """Decode base64 text into a fully loaded Pillow image.

        Raises:
            ValueError: If ``data`` is not base64 or the bytes are not an image.
        """
        try:
            raw = base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValueError("Invalid base64 data provided") from exc

        try:
            image = Image.open(io.BytesIO(raw))
            image.load()
        except (UnidentifiedImageError, OSError) as exc:
            raise ValueError("Decoded bytes are not a supported image format") from exc
        return image

    def _flatten(self, image: Image.Image) -> Image.Image:
        rgba = image.convert("RGBA")
        rgba.thumbnail(self.max_size, Image.LANCZOS)
        canvas = Image.new("RGB", rgba.size, self.background)
        canvas.paste(rgba, mask=rgba.getchannel("A"))
        return canvas

    def create_preview_from_base64(self, data: str | bytes) -> str:
        """Return a ``data:image/png;base64,...`` preview of the encoded image.

        Raises:
            ValueError: If the data cannot be decoded or opened as an image.
        """
        preview = self._flatten(self.decode(data))
        buffer = io.BytesIO()
        preview.save(buffer, format="PNG", optimize=True)
        return f"data:{PREVIEW_MIME_TYPE};base64,{base64.b64encode(buffer.getvalue()).decode('ascii')}"
