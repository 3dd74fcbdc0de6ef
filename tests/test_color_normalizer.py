"""Color value types and name normalisation."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models.color import (
    NEUTRAL_GRAY,
    Color,
    DominantColor,
    GarmentColorAnalysis,
    canonical_hex,
    coerce_dominant_colors,
    hex_to_rgb,
    is_valid_hex,
    normalize_color,
)


def test_known_name_resolves_to_hex() -> None:
    color = normalize_color("Marinho")
    assert color.hex == "#000080"
    assert color.name == "Marinho"


def test_lookup_is_case_and_whitespace_insensitive() -> None:
    assert normalize_color("  azul ROYAL ").hex == "#4169E1"
    assert normalize_color("Pêssego").hex == "#FFDAB9"


def test_unknown_name_falls_back_to_gray_and_keeps_label() -> None:
    color = normalize_color("Cor Inventada")
    assert color.hex == NEUTRAL_GRAY
    assert color.name == "Cor Inventada"


def test_existing_color_is_returned_unchanged() -> None:
    original = Color(hex="#000080", name="Marinho")
    assert normalize_color(original) is original
    assert normalize_color(normalize_color("marinho")) == normalize_color("marinho")


def test_mapping_input_is_canonicalised() -> None:
    color = normalize_color({"hex": "#00ced1", "name": "Turquesa Fria"})
    assert color == Color(hex="#00CED1", name="Turquesa Fria")


def test_mapping_with_bad_hex_uses_name() -> None:
    assert normalize_color({"hex": "#XYZ", "name": "preto"}).hex == "#000000"
    assert normalize_color({"hex": None, "name": ""}).hex == NEUTRAL_GRAY


def test_hex_helpers() -> None:
    assert is_valid_hex("#a0B1c2")
    assert is_valid_hex("a0b1c2")
    assert not is_valid_hex("#12345")
    assert not is_valid_hex(None)
    assert canonical_hex("a0b1c2") == "#A0B1C2"
    assert hex_to_rgb("#FF8000") == (255, 128, 0)
    assert hex_to_rgb("not-a-color") is None

    with pytest.raises(ValueError):
        canonical_hex("#GGGGGG")


def test_color_rejects_invalid_hex() -> None:
    with pytest.raises(ValueError):
        Color(hex="navy", name="navy")


def test_dominant_color_rejects_negative_share() -> None:
    with pytest.raises(ValueError):
        DominantColor(hex="#000000", name="Preto", percentage=-0.1)


def test_coerce_dominant_colors_accepts_loose_payloads() -> None:
    colors = coerce_dominant_colors(
        [
            {"hex": "#000080", "name": "Marinho", "percentage": 0.7},
            DominantColor(hex="#FFFFFF", name="Branco", percentage=0.3),
        ]
    )
    assert [c.hex for c in colors] == ["#000080", "#FFFFFF"]
    assert coerce_dominant_colors(None) == []

    with pytest.raises(ValueError):
        coerce_dominant_colors(["#000080"])


def test_garment_analysis_validates_enums() -> None:
    analysis = GarmentColorAnalysis(
        dominant_colors=[{"hex": "#000080", "name": "Marinho", "percentage": 1}],
        overall_tone="Cool",
        saturation="vivid",
        brightness="dark",
    )
    assert analysis.overall_tone == "cool"
    assert analysis.dominant_colors[0].percentage == 1.0

    with pytest.raises(ValueError):
        GarmentColorAnalysis(overall_tone="lukewarm")
