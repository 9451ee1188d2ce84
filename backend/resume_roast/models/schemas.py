from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class RoastLevel(str, Enum):
    """Coarse severity of a roast, derived from the score."""
    MILD = "mild"
    MEDIUM = "medium"
    SPICY = "spicy"
    NUCLEAR = "nuclear"

    @property
    def label(self) -> str:
        return ROAST_LABELS[self]


ROAST_LABELS = {
    RoastLevel.MILD: "Gentle Roast ❤️",
    RoastLevel.MEDIUM: "Medium Roast 😄",
    RoastLevel.SPICY: "Spicy Roast 🌶️",
    RoastLevel.NUCLEAR: "Nuclear Roast 💀",
}


class _WireModel(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(populate_by_name=True)


class CritiqueRequest(_WireModel):
    # Emptiness is checked by CritiqueService so it maps to a 400, not a 422.
    resume_text: str = Field(default="", alias="resumeText")
    filename: str = Field(default="")


class CritiqueResponse(_WireModel):
    critique: str
    score: int
    roast_level: RoastLevel = Field(..., alias="roastLevel")


class CritiqueResult(CritiqueResponse):
    """A critique together with the upload it was generated from."""
    id: str = Field(default_factory=lambda: uuid4().hex)
    filename: str
    resume_text: str = Field(..., alias="resumeText")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class CritiqueExportRequest(_WireModel):
    filename: str = Field(..., min_length=1)
    critique: str
    score: int
    roast_level: RoastLevel = Field(..., alias="roastLevel")


class HealthResponse(BaseModel):
    status: str = "ok"
    mode: str


class ErrorResponse(BaseModel):
    error: str
