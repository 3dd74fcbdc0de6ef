"""Compatibility classifier behaviour."""

from __future__ import annotations

import dataclasses
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.compatibility import (
    ClassifierThresholds,
    PaletteScore,
    classify,
    classify_analysis,
    classify_color_code,
    color_distance,
    decide,
    score_palette,
)
from models.color import Color, DominantColor, GarmentColorAnalysis
from models.season import SeasonColors, build_palette
from tools.season_catalog import SeasonCatalog


@pytest.fixture(scope="module")
def catalog() -> SeasonCatalog:
    loaded = SeasonCatalog()
    loaded.init()
    return loaded


@pytest.fixture()
def winter_cool(catalog: SeasonCatalog):
    return catalog.by_id("winter-cool")


@pytest.fixture()
def black_and_white():
    return build_palette(
        "bw",
        primary=[Color(hex="#FFFFFF", name="Branco")],
        avoid=[Color(hex="#000000", name="Preto")],
    )


def _dc(hex_value: str, percentage: float = 1.0, name: str = "") -> DominantColor:
    return DominantColor(hex=hex_value, name=name, percentage=percentage)


def test_missing_inputs_are_unknown(winter_cool) -> None:
    assert classify([], winter_cool) == "unknown"
    assert classify(None, winter_cool) == "unknown"
    assert classify([_dc("#000080")], None) == "unknown"


def test_navy_is_ideal_for_winter_cool(winter_cool) -> None:
    assert classify([_dc("#000080", 0.9, "Marinho")], winter_cool) == "ideal"


def test_primary_match_is_ideal_for_every_season(catalog: SeasonCatalog) -> None:
    for season in catalog.seasons():
        for color in season.colors.primary:
            assert classify([_dc(color.hex)], season) == "ideal", (season.id, color.hex)


def test_avoid_match_with_distant_primary_is_avoid(black_and_white) -> None:
    assert classify([_dc("#000000")], black_and_white) == "avoid"


def test_peach_without_avoid_list_is_neutral(winter_cool) -> None:
    no_avoid = dataclasses.replace(
        winter_cool, colors=SeasonColors(primary=winter_cool.colors.primary, avoid=())
    )
    score = score_palette([_dc("#FFDAB9", 1.0, "Pêssego")], no_avoid)
    assert score.d_avoid == 1.0
    assert 0.15 < score.d_primary < 0.2
    assert classify([_dc("#FFDAB9", 1.0, "Pêssego")], no_avoid) == "neutral"


def test_peach_close_to_khaki_is_avoid_for_winter_cool(winter_cool) -> None:
    assert classify([_dc("#FFDAB9", 1.0, "Pêssego")], winter_cool) == "avoid"


def test_thresholds_are_tunable(winter_cool) -> None:
    no_avoid = dataclasses.replace(
        winter_cool, colors=SeasonColors(primary=winter_cool.colors.primary, avoid=())
    )
    loose = ClassifierThresholds(ideal_threshold=0.2, avoid_margin=0.05)
    assert classify([_dc("#FFDAB9")], no_avoid, loose) == "ideal"


def test_color_distance_is_normalised() -> None:
    assert color_distance("#000000", "#FFFFFF") == pytest.approx(1.0)
    assert color_distance("#123456", "#123456") == 0.0
    assert color_distance("#ZZZZZZ", "#000000") == 1.0


def test_malformed_hex_counts_as_maximally_distant(black_and_white) -> None:
    score = score_palette([_dc("#NOPE00")], black_and_white)
    assert score == PaletteScore(d_primary=1.0, d_avoid=1.0)
    assert classify([_dc("#NOPE00")], black_and_white) == "neutral"


def test_percentage_scale_does_not_change_label(black_and_white) -> None:
    fractions = [_dc("#FFFFFF", 0.8), _dc("#000000", 0.2)]
    percents = [_dc("#FFFFFF", 80), _dc("#000000", 20)]
    assert classify(fractions, black_and_white) == classify(percents, black_and_white)
    by_fraction = score_palette(fractions, black_and_white)
    by_percent = score_palette(percents, black_and_white)
    assert by_fraction.d_primary == pytest.approx(by_percent.d_primary)
    assert by_fraction.d_avoid == pytest.approx(by_percent.d_avoid)


def test_zero_shares_weigh_colors_equally(black_and_white) -> None:
    score = score_palette([_dc("#FFFFFF", 0), _dc("#000000", 0)], black_and_white)
    assert score.d_primary == pytest.approx(0.5)
    assert score.d_avoid == pytest.approx(0.5)


def test_decide_prefers_avoid_over_ideal() -> None:
    assert decide(PaletteScore(d_primary=0.12, d_avoid=0.0)) == "avoid"
    assert decide(PaletteScore(d_primary=0.1, d_avoid=0.08)) == "ideal"
    assert decide(PaletteScore(d_primary=0.3, d_avoid=0.28)) == "neutral"


def test_classification_is_deterministic(winter_cool) -> None:
    colors = [_dc("#4B0082", 0.6), _dc("#C0C0C0", 0.4)]
    labels = {classify(colors, winter_cool) for _ in range(5)}
    assert len(labels) == 1


def test_color_code_fallback(winter_cool) -> None:
    assert classify_color_code("#000080", winter_cool) == "ideal"
    assert classify_color_code("#ff8c00", winter_cool) == "avoid"
    assert classify_color_code(None, winter_cool) == "unknown"
    assert classify_color_code("#000080", None) == "unknown"


def test_classify_analysis(winter_cool) -> None:
    analysis = GarmentColorAnalysis(dominant_colors=[_dc("#DC143C", 0.9, "Carmesim")])
    assert classify_analysis(analysis, winter_cool) == "ideal"
    assert classify_analysis(None, winter_cool) == "unknown"


def test_analysis_descriptors_do_not_change_the_label(winter_cool) -> None:
    colors = [_dc("#FFDAB9", 1.0, "Pêssego")]
    labels = {
        classify_analysis(
            GarmentColorAnalysis(dominant_colors=colors, overall_tone=tone, saturation=saturation),
            winter_cool,
        )
        for tone in ("warm", "cool", "neutral")
        for saturation in ("vivid", "muted")
    }
    assert labels == {classify(colors, winter_cool)}
