from __future__ import annotations

from .goal import ACTIVITY_MULTIPLIERS, WEATHER_ADJUSTMENTS
from .units import lb_to_kg

MIN_WEIGHT_KG = 20.0
MAX_WEIGHT_KG = 300.0
UNUSUAL_WEIGHT_THRESHOLD_KG = 20.0

# Bounds for a single logged drink.
MIN_LOG_AMOUNT_ML = 1.0
MAX_LOG_AMOUNT_ML = 1000.0


def _to_kg(weight: float, unit: str) -> float:
    return lb_to_kg(weight) if unit.lower() == "lb" else weight


def is_unusual_weight(weight: float, unit: str) -> bool:
    """True for a positive weight under 20 kg, which needs user confirmation."""
    weight_kg = _to_kg(weight, unit)
    return 0 < weight_kg < UNUSUAL_WEIGHT_THRESHOLD_KG


def validate_weight(weight: float | None, unit: str) -> bool:
    if weight is None or weight <= 0:
        return False
    weight_kg = _to_kg(weight, unit)
    return MIN_WEIGHT_KG <= weight_kg <= MAX_WEIGHT_KG


def validate_activity_level(activity_level: str | None) -> bool:
    return activity_level is not None and activity_level.lower() in ACTIVITY_MULTIPLIERS


def validate_weather_condition(weather_condition: str | None) -> bool:
    return weather_condition is not None and weather_condition.lower() in WEATHER_ADJUSTMENTS


def validate_log_amount(ml: float | None) -> bool:
    return ml is not None and MIN_LOG_AMOUNT_ML <= ml <= MAX_LOG_AMOUNT_ML
