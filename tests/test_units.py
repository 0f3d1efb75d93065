import pytest

from water_goal.units import (
    convert_volume,
    convert_weight,
    kg_to_lb,
    lb_to_kg,
    ml_to_oz,
    oz_to_ml,
)


def test_kg_to_lb() -> None:
    assert kg_to_lb(70) == pytest.approx(154.3234, abs=0.01)


def test_lb_to_kg() -> None:
    assert lb_to_kg(154.324) == pytest.approx(70.0, abs=0.1)


def test_ml_to_oz() -> None:
    assert ml_to_oz(3450) == pytest.approx(116.66, abs=0.05)


def test_oz_to_ml_uses_its_own_constant() -> None:
    assert oz_to_ml(1) == 29.5735
    assert ml_to_oz(1) == 0.033814


@pytest.mark.parametrize(
    ("value", "from_unit", "expected"),
    [
        (70.0, "kg", 154.3234),
        (70.0, "KG", 154.3234),
        (154.3234, "lb", 70.0),
        (0.0, "kg", 0.0),
        (-10.0, "lb", -4.5359),
    ],
)
def test_convert_weight(value: float, from_unit: str, expected: float) -> None:
    assert convert_weight(value, from_unit) == pytest.approx(expected, abs=1e-3)


def test_convert_weight_rejects_unknown_unit() -> None:
    with pytest.raises(ValueError, match="stone"):
        convert_weight(10.0, "stone")


def test_convert_volume_directions() -> None:
    assert convert_volume(3450, "ml_to_oz") == pytest.approx(116.66, abs=0.05)
    assert convert_volume(10, "OZ_TO_ML") == pytest.approx(295.735)
    with pytest.raises(ValueError):
        convert_volume(10, "l_to_gal")


@pytest.mark.parametrize("ml", [250.0, 1000.0, 3450.0])
def test_volume_round_trip_within_constant_drift(ml: float) -> None:
    back = convert_volume(convert_volume(ml, "ml_to_oz"), "oz_to_ml")
    assert back == pytest.approx(ml, rel=2e-4)
    assert back != ml
