"""Operation instrumentation and payload validation."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.validation import ClassifyInput, validation_failure
from tools.observability import instrument_operation, operation_stats, reset_operation_stats


def test_validated_kwargs_reach_the_function() -> None:
    @instrument_operation("echo_colors", input_model=ClassifyInput)
    def run_classify(dominant_colors=(), season_id=None):
        return [color.hex for color in dominant_colors], season_id

    hexes, season_id = run_classify(dominant_colors=[{"hex": "#000080", "percentage": 1}], season_id="winter-cool")
    assert hexes == ["#000080"]
    assert season_id == "winter-cool"


def test_validation_failure_can_be_translated() -> None:
    @instrument_operation(
        "reject_colors",
        input_model=ClassifyInput,
        on_validation_error=lambda exc: validation_failure("Invalid colors", exc),
    )
    def run_classify(dominant_colors=(), season_id=None):
        raise AssertionError("should not run")

    result = run_classify(dominant_colors=[{"hex": "#000080", "percentage": -5}])
    assert result["status"] == "needs_review"
    assert result["details"]


def test_errors_propagate() -> None:
    @instrument_operation("boom")
    def boom():
        raise RuntimeError("nope")

    with pytest.raises(RuntimeError):
        boom()

    @instrument_operation("strict", input_model=ClassifyInput)
    def strict(dominant_colors=(), season_id=None):
        return None

    with pytest.raises(ValidationError):
        strict(dominant_colors="not-a-list")


def test_positional_arguments_are_validated() -> None:
    @instrument_operation("positional", input_model=ClassifyInput)
    def run_classify(dominant_colors, season_id=None):
        return dominant_colors[0].percentage

    assert run_classify([{"hex": "#000080", "percentage": "0.5"}]) == 0.5
    with pytest.raises(ValidationError):
        run_classify([{"hex": "#000080", "percentage": -1}])


def test_operation_counters() -> None:
    reset_operation_stats()

    @instrument_operation("counted", input_model=ClassifyInput, summarize=lambda result: {"label": result})
    def counted(dominant_colors=(), season_id=None):
        if season_id == "explode":
            raise RuntimeError("boom")
        return "ideal"

    counted(season_id="winter-cool")
    with pytest.raises(RuntimeError):
        counted(season_id="explode")
    with pytest.raises(ValidationError):
        counted(dominant_colors=[{"hex": "#000080"}])

    stats = operation_stats()["counted"]
    assert stats["calls"] == 3
    assert stats["failures"] == 1
    assert stats["rejected"] == 1
    assert stats["mean_ms"] >= 0.0
