"""Typed shapes for identifier, calculator and contact form data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool

REQUIRED_CONTACT_FIELDS = ("name", "phone", "address")


class IdentificationResult(BaseModel):
    """Structured classification of a scrap photo."""

    model_config = ConfigDict(populate_by_name=True)

    item_name: str = Field(alias="itemName")
    category: str
    recyclable: StrictBool
    estimated_price: str = Field(alias="estimatedPrice")


class EnvironmentalImpact(BaseModel):
    metric: str
    value: str


class CalculationResult(BaseModel):
    """Estimated resale value plus the recycling impact of a scrap batch."""

    model_config = ConfigDict(populate_by_name=True)

    estimated_value: str = Field(alias="estimatedValue")
    environmental_impact: EnvironmentalImpact = Field(alias="environmentalImpact")
    disclaimer: str


@dataclass
class UploadedImage:
    """Image selected in the identifier, kept as base64 text plus its MIME type.

    Attributes:
        data_b64: Base64-encoded image payload (no data URI prefix).
        mime_type: MIME type extracted from the data URI, e.g. ``image/png``.
        filename: Original upload filename, when the browser sent one.
    """

    data_b64: str
    mime_type: str
    filename: Optional[str] = None

    @property
    def data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.data_b64}"


@dataclass
class ContactSubmission:
    """Values posted by the pickup request form."""

    fields: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_form(cls, form: Mapping[str, str]) -> "ContactSubmission":
        """Collect required fields (empty when absent) and any extra submitted ones."""
        values = {key: "" for key in REQUIRED_CONTACT_FIELDS}
        for key, value in form.items():
            values[key] = value if isinstance(value, str) else ""
        return cls(fields=values)

    @property
    def name(self) -> str:
        return self.fields.get("name", "").strip()

    def empty_fields(self) -> List[str]:
        return [key for key, value in self.fields.items() if not value.strip()]

    def is_complete(self) -> bool:
        return not self.empty_fields()
