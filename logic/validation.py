"""Pydantic schemas for validating catalog rows and engine payloads."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from models.color import Color, DominantColor, canonical_hex, normalize_color
from models.season import SeasonCharacteristics, SeasonColors, SeasonPalette
from models.taxonomy import normalize_main_season


class ColorSchema(BaseModel):
    """A catalog color; bare names are resolved through the color normalizer."""

    hex: str
    name: str = ""

    @model_validator(mode="before")
    @classmethod
    def _resolve_names(cls, value: Any) -> Any:
        if isinstance(value, str):
            return normalize_color(value).to_dict()
        if isinstance(value, Color):
            return value.to_dict()
        if isinstance(value, Mapping) and not value.get("hex"):
            return normalize_color(value).to_dict()
        return value

    @field_validator("hex")
    @classmethod
    def _validate_hex(cls, value: str) -> str:
        return canonical_hex(value)

    def to_color(self) -> Color:
        return Color(hex=self.hex, name=self.name)


class SeasonCharacteristicsSchema(BaseModel):
    """Fixed enumerations describing a season's profile."""

    temperature: Literal["warm", "cool", "neutral-warm", "neutral-cool"]
    depth: Literal["light", "medium", "deep"]
    chroma: Literal["bright", "muted", "clear"]


class SeasonColorsSchema(BaseModel):
    """Color sets of a season; primary and avoid must not share a hex."""

    primary: List[ColorSchema] = Field(min_length=1)
    avoid: List[ColorSchema] = Field(default_factory=list)
    neutrals: List[ColorSchema] = Field(default_factory=list)
    accents: List[ColorSchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def _no_overlap(self) -> "SeasonColorsSchema":
        overlap = {c.hex for c in self.primary} & {c.hex for c in self.avoid}
        if overlap:
            raise ValueError(f"primary and avoid colors overlap: {sorted(overlap)}")
        return self


class SeasonRowSchema(BaseModel):
    """One row of the static season table."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    subtype: str = ""
    main_season: str
    short_description: str = ""
    characteristics: SeasonCharacteristicsSchema
    colors: SeasonColorsSchema

    @field_validator("main_season")
    @classmethod
    def _validate_main_season(cls, value: str) -> str:
        return normalize_main_season(value)

    def to_palette(self) -> SeasonPalette:
        colors = self.colors
        return SeasonPalette(
            id=self.id,
            name=self.name,
            subtype=self.subtype,
            main_season=self.main_season,
            short_description=self.short_description,
            characteristics=SeasonCharacteristics(**self.characteristics.model_dump()),
            colors=SeasonColors(
                primary=tuple(c.to_color() for c in colors.primary),
                avoid=tuple(c.to_color() for c in colors.avoid),
                neutrals=tuple(c.to_color() for c in colors.neutrals),
                accents=tuple(c.to_color() for c in colors.accents),
            ),
        )


class DominantColorSchema(BaseModel):
    """A dominant color reported by the vision service."""

    hex: str
    name: str = ""
    percentage: float = Field(ge=0.0)

    @model_validator(mode="before")
    @classmethod
    def _from_dataclass(cls, value: Any) -> Any:
        if isinstance(value, DominantColor):
            return value.to_dict()
        return value

    def to_dominant_color(self) -> DominantColor:
        return DominantColor(hex=self.hex, name=self.name, percentage=self.percentage)


class ClassifyInput(BaseModel):
    """Input contract for single-garment classification."""

    dominant_colors: List[DominantColorSchema] = Field(default_factory=list)
    season_id: Optional[str] = None


class ClassifyItemInput(BaseModel):
    """Input contract for the upload-time classify-and-store path."""

    user_id: str = Field(min_length=1)
    item_id: str = Field(min_length=1)
    dominant_colors: List[DominantColorSchema] = Field(default_factory=list)


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    return ValidationResult(message=message, details=exc.errors()).model_dump()


__all__ = [
    "ColorSchema",
    "SeasonCharacteristicsSchema",
    "SeasonColorsSchema",
    "SeasonRowSchema",
    "DominantColorSchema",
    "ClassifyInput",
    "ClassifyItemInput",
    "ValidationResult",
    "validation_failure",
]
