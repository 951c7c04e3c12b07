"""Utilities to build multimodal input payloads for the Responses API."""

from typing import Any, Dict, List


def to_image_data_url(image_b64: str, mime_type: str) -> str:
    """Combine base64 image text and its MIME type into a data URL."""
    if not image_b64:
        raise ValueError("Image payload is empty.")
    return f"data:{mime_type};base64,{image_b64}"


def build_image_inputs(prompt: str, image_b64: str, mime_type: str) -> List[Dict[str, Any]]:
    """Build one user message carrying the text prompt and the inline image."""
    return [
        {
            "type": "message",
            "role": "user",
            "content": [
                {"type": "input_text", "text": prompt},
                {"type": "input_image", "image_url": to_image_data_url(image_b64, mime_type)},
            ],
        }
    ]
