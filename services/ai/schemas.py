"""Structured output formats for scrap identification and valuation."""

from typing import Any, Dict

IDENTIFICATION_FORMAT_NAME = "scrap_identification"
VALUATION_FORMAT_NAME = "scrap_valuation"

IDENTIFICATION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "itemName": {"type": "string"},
        "category": {"type": "string"},
        "recyclable": {"type": "boolean"},
        "estimatedPrice": {"type": "string"},
    },
    "required": ["itemName", "category", "recyclable", "estimatedPrice"],
    "additionalProperties": False,
}

VALUATION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "estimatedValue": {"type": "string"},
        "environmentalImpact": {
            "type": "object",
            "properties": {
                "metric": {"type": "string"},
                "value": {"type": "string"},
            },
            "required": ["metric", "value"],
            "additionalProperties": False,
        },
        "disclaimer": {"type": "string"},
    },
    "required": ["estimatedValue", "environmentalImpact", "disclaimer"],
    "additionalProperties": False,
}


def json_schema_format(name: str, schema: Dict[str, Any]) -> Dict[str, Any]:
    """Wrap a JSON schema as a strict Responses API ``text.format`` entry."""
    return {"format": {"type": "json_schema", "name": name, "schema": schema, "strict": True}}


IDENTIFICATION_TEXT_FORMAT = json_schema_format(IDENTIFICATION_FORMAT_NAME, IDENTIFICATION_SCHEMA)
VALUATION_TEXT_FORMAT = json_schema_format(VALUATION_FORMAT_NAME, VALUATION_SCHEMA)
