"""Tests for nutrient scaling."""

import pytest

from calorie_curve.domain.nutrition import NUTRIENT_FIELDS, NutrientRecord
from calorie_curve.services.normalize import normalize_record
from calorie_curve.services.scaling import format_amount, round_amount, scale_record
from tests.conftest import BANANA


def _record(**overrides: object) -> NutrientRecord:
    return normalize_record({**BANANA, **overrides}, fallback_name="banana")


def test_scale_record_uses_portion_reference() -> None:
    scaled = scale_record(_record(), 150, 150, "g")

    assert scaled.calories == pytest.approx(133.47)
    assert scaled.potassium == pytest.approx(536.44)
    assert scaled.portion == "custom serving (150g)"
    assert scaled.name == "Banana"


def test_scale_record_is_linear() -> None:
    record = _record()
    ratio = 300 / 118

    scaled = scale_record(record, 300, 300, "g")

    for field_name in NUTRIENT_FIELDS:
        expected = round_amount(getattr(record, field_name) * ratio)
        assert getattr(scaled, field_name) == expected


def test_scale_record_ratio_one_keeps_values() -> None:
    record = _record()

    scaled = scale_record(record, 118, 118, "g")

    for field_name in NUTRIENT_FIELDS:
        assert getattr(scaled, field_name) == getattr(record, field_name)
    assert scaled.portion == "custom serving (118g)"


def test_scale_record_defaults_reference_to_100() -> None:
    record = _record(portion="1 large cup", calories=200)

    scaled = scale_record(record, 50, 50, "g")

    assert scaled.calories == 100


def test_scale_record_labels_volume_units() -> None:
    record = _record(portion="1 glass (250ml)", calories=100)

    scaled = scale_record(record, 500, 500, "mL")

    assert scaled.calories == 200
    assert scaled.portion == "custom serving (500ml)"


def test_scale_record_without_amount_passes_through() -> None:
    record = _record()

    assert scale_record(record, None, None, None) is record
    assert scale_record(record, 0, 0, "g") is record


def test_scale_record_does_not_mutate_input() -> None:
    record = _record()

    scale_record(record, 236, 236, "g")

    assert record.calories == 105
    assert record.portion == "1 medium (118g)"


def test_round_amount_half_away_from_zero() -> None:
    assert round_amount(0.125) == 0.13
    assert round_amount(2.675) == 2.68
    assert round_amount(1.004) == 1.0


def test_format_amount() -> None:
    assert format_amount(150.0) == "150"
    assert format_amount(1.5) == "1.5"


def test_round_amount_non_finite_is_zero() -> None:
    assert round_amount(float("inf")) == 0
    assert round_amount(float("-inf")) == 0
    assert round_amount(float("nan")) == 0


def test_scale_record_with_overflowing_target() -> None:
    record = _record(vitaminD=0)

    scaled = scale_record(record, float("inf"), 1, "g")

    for field_name in NUTRIENT_FIELDS:
        assert getattr(scaled, field_name) == 0
