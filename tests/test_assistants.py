"""Tests for the live and mock scrap assistants and the startup factory."""

import json
import logging

import pytest

from models.scrap_models import CalculationResult, IdentificationResult
from services.ai.errors import ScrapIdentificationError, ScrapValuationError
from services.ai.factory import build_assistant
from services.ai.live_assistant import CHAT_ERROR_REPLY, LiveScrapAssistant
from services.ai.mock_assistant import MockScrapAssistant
from services.ai.schemas import IDENTIFICATION_TEXT_FORMAT, VALUATION_TEXT_FORMAT

pytestmark = [pytest.mark.fast]

LIVE_IDENTIFICATION = json.dumps(
    {"itemName": "Copper Wire", "category": "Metal", "recyclable": True, "estimatedPrice": "₹400-450 per kg"}
)
LIVE_VALUATION = json.dumps(
    {
        "estimatedValue": "₹60 - ₹75",
        "environmentalImpact": {"metric": "Trees Saved", "value": "Approx. 0.1 trees"},
        "disclaimer": "Prices vary based on market rates and quality.",
    }
)


@pytest.mark.asyncio
async def test_identify_shape_matches_between_mock_and_live(mock_assistant, fake_openai, png_b64):
    """Both modes return JSON with the same keys that validates as IdentificationResult."""
    live = LiveScrapAssistant(fake_openai(outputs=[LIVE_IDENTIFICATION]), model="test-model")

    mock_payload = json.loads(await mock_assistant.identify_scrap(png_b64, "image/png"))
    live_payload = json.loads(await live.identify_scrap(png_b64, "image/png"))

    assert set(mock_payload) == set(live_payload)
    assert IdentificationResult.model_validate(mock_payload).item_name == "Old Newspapers"
    assert IdentificationResult.model_validate(live_payload).recyclable is True


@pytest.mark.asyncio
async def test_calculate_shape_matches_between_mock_and_live(mock_assistant, fake_openai):
    live = LiveScrapAssistant(fake_openai(outputs=[LIVE_VALUATION]), model="test-model")

    mock_payload = json.loads(await mock_assistant.calculate_scrap_value("Newspaper", "5", "kg"))
    live_payload = json.loads(await live.calculate_scrap_value("Newspaper", "5", "kg"))

    assert set(mock_payload) == set(live_payload)
    assert set(mock_payload["environmentalImpact"]) == {"metric", "value"}
    CalculationResult.model_validate(mock_payload)
    CalculationResult.model_validate(live_payload)


@pytest.mark.asyncio
async def test_mock_calculation_example(mock_assistant):
    """Newspaper / 5 / kg gives a rupee range and a water-saved figure."""
    result = CalculationResult.model_validate_json(await mock_assistant.calculate_scrap_value("Newspaper", "5", "kg"))

    assert result.estimated_value.startswith("₹")
    assert " - ₹" in result.estimated_value
    assert result.environmental_impact.metric == "Water Saved"
    assert result.environmental_impact.value.startswith("Approx. ")
    assert result.environmental_impact.value.endswith(" litres")


@pytest.mark.asyncio
async def test_mock_chat_and_contact_texts(mock_assistant):
    session = mock_assistant.start_chat()
    reply = await mock_assistant.send_message(session, "copper price?")
    confirmation = await mock_assistant.generate_contact_response("Asha")

    assert reply == 'This is a mock AI response about "copper price?". The API key is not configured.'
    assert session.turns == 1
    assert "Asha" in confirmation


def test_mock_rejects_negative_delay_scale():
    with pytest.raises(ValueError):
        MockScrapAssistant(delay_scale=-1)


@pytest.mark.asyncio
async def test_live_identify_sends_inline_image_and_strict_schema(fake_openai, png_b64):
    client = fake_openai(outputs=[LIVE_IDENTIFICATION])
    live = LiveScrapAssistant(client, model="test-model")

    await live.identify_scrap(png_b64, "image/png")

    call = client.responses.calls[0]
    assert call["model"] == "test-model"
    assert call["text"] == IDENTIFICATION_TEXT_FORMAT
    assert call["text"]["format"]["strict"] is True
    content = call["input"][0]["content"]
    assert content[0]["type"] == "input_text"
    assert content[1]["image_url"] == f"data:image/png;base64,{png_b64}"


@pytest.mark.asyncio
async def test_live_calculate_uses_valuation_schema(fake_openai):
    client = fake_openai(outputs=[LIVE_VALUATION])
    live = LiveScrapAssistant(client, model="test-model")

    await live.calculate_scrap_value("Copper", "2", "kg")

    call = client.responses.calls[0]
    assert call["text"] == VALUATION_TEXT_FORMAT
    assert "Copper" in call["input"]


@pytest.mark.asyncio
async def test_live_chat_threads_previous_response_id(fake_openai):
    client = fake_openai(outputs=["  We buy paper.  ", "Yes, metals too."])
    live = LiveScrapAssistant(client, model="test-model")
    session = live.start_chat()

    first = await live.send_message(session, "What do you buy?")
    await live.send_message(session, "Metals?")

    assert first == "We buy paper."
    assert client.responses.calls[0]["previous_response_id"] is None
    assert client.responses.calls[1]["previous_response_id"] == "resp_1"
    assert "Kabaadi Assistant" in client.responses.calls[0]["instructions"]


@pytest.mark.asyncio
async def test_live_chat_falls_back_to_apology(fake_openai):
    live = LiveScrapAssistant(fake_openai(error=RuntimeError("provider down")), model="test-model")

    reply = await live.send_message(live.start_chat(), "hello")

    assert reply == CHAT_ERROR_REPLY


@pytest.mark.asyncio
async def test_live_contact_falls_back_to_static_thanks(fake_openai):
    live = LiveScrapAssistant(fake_openai(error=RuntimeError("provider down")), model="test-model")

    text = await live.generate_contact_response("Ravi")

    assert text == (
        "Thank you, Ravi! Your pickup request has been received. A local kabaadiwala will contact you shortly."
    )


@pytest.mark.asyncio
async def test_live_identify_and_calculate_raise_domain_errors(fake_openai, png_b64):
    live = LiveScrapAssistant(fake_openai(error=RuntimeError("provider down")), model="test-model")

    with pytest.raises(ScrapIdentificationError, match="Please try a clearer image"):
        await live.identify_scrap(png_b64, "image/png")
    with pytest.raises(ScrapValuationError, match="Could not calculate the value"):
        await live.calculate_scrap_value("Iron", "3", "kg")


def test_factory_without_key_returns_mock_and_warns(caplog, monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    with caplog.at_level(logging.WARNING, logger="services.ai.factory"):
        assistant = build_assistant(mock_delay_scale=0)

    assert isinstance(assistant, MockScrapAssistant)
    assert assistant.mock_mode is True
    assert "OPENAI_API_KEY" in caplog.text


def test_factory_blank_key_counts_as_missing():
    assert build_assistant("   ", mock_delay_scale=0).mock_mode is True


def test_factory_with_key_returns_live():
    assistant = build_assistant("sk-test", model="test-model")

    assert isinstance(assistant, LiveScrapAssistant)
    assert assistant.mock_mode is False
    assert assistant.model == "test-model"


def test_factory_reads_model_from_environment_at_build_time(monkeypatch, tmp_path):
    """OPENAI_MODEL loaded from a .env file after import is still honoured."""
    from dotenv import load_dotenv

    monkeypatch.setenv("OPENAI_MODEL", "placeholder")
    env_file = tmp_path / ".env"
    env_file.write_text("OPENAI_MODEL=gpt-from-dotenv\n")
    load_dotenv(env_file, override=True)

    assistant = build_assistant("sk-test")

    assert assistant.model == "gpt-from-dotenv"


def test_factory_defaults_model_when_unset(monkeypatch):
    monkeypatch.delenv("OPENAI_MODEL", raising=False)

    assert build_assistant("sk-test").model == "gpt-5-mini"
