"""Pytest fixtures: zero-delay mock assistant, fake OpenAI client and tiny images."""

import base64
import io
import random
from types import SimpleNamespace

import pytest
from PIL import Image

from services.ai.mock_assistant import MockScrapAssistant


class FakeResponses:
    """Stands in for ``AsyncOpenAI().responses``; records every create() call."""

    def __init__(self, outputs=None, error=None):
        self.calls = []
        self.outputs = list(outputs or [])
        self.error = error

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        text = self.outputs.pop(0) if self.outputs else ""
        return SimpleNamespace(
            id=f"resp_{len(self.calls)}",
            output=[
                SimpleNamespace(type="message", content=[SimpleNamespace(type="output_text", text=text)]),
            ],
            output_text=text,
            usage=SimpleNamespace(input_tokens=12, output_tokens=7),
        )


def make_png_bytes(size=(32, 24), color=(200, 120, 40)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def fake_openai():
    """Build a fake client: ``fake_openai(outputs=[...])`` or ``fake_openai(error=exc)``."""

    def _build(outputs=None, error=None):
        return SimpleNamespace(responses=FakeResponses(outputs=outputs, error=error))

    return _build


@pytest.fixture
def mock_assistant():
    return MockScrapAssistant(delay_scale=0, rng=random.Random(7))


@pytest.fixture
def png_bytes():
    return make_png_bytes()


@pytest.fixture
def png_b64(png_bytes):
    return base64.b64encode(png_bytes).decode("ascii")
