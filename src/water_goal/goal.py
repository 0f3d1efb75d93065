from __future__ import annotations

import logging
import math
from types import MappingProxyType
from typing import Mapping

from .models import GoalBreakdown, HydrationProfile

logger = logging.getLogger(__name__)

ML_PER_KG = 35.0
ROUNDING_INTERVAL_ML = 50.0

# Multipliers applied to the weight-based amount.
# - sedentary: little or no exercise
# - light: light exercise 1-3 days a week
# - moderate: moderate exercise 3-5 days a week
# - active: hard exercise 6-7 days a week
# - very_active: physical job or training twice a day
ACTIVITY_MULTIPLIERS: Mapping[str, float] = MappingProxyType(
    {
        "sedentary": 1.0,
        "light": 1.1,
        "moderate": 1.2,
        "active": 1.3,
        "very_active": 1.4,
    }
)

# Extra ml per day for the ambient weather. "cold" is an alias of "cool".
WEATHER_ADJUSTMENTS: Mapping[str, float] = MappingProxyType(
    {
        "cool": 0.0,
        "cold": 0.0,
        "mild": 200.0,
        "warm": 400.0,
        "hot": 600.0,
    }
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up, unlike ``round``."""
    return math.floor(value + 0.5)


def goal_breakdown(weight_kg: float, activity_level: str, weather_condition: str) -> GoalBreakdown:
    """Run the goal formula and keep every intermediate amount."""
    if weight_kg <= 0:
        raise ValueError("Weight must be greater than 0")
    activity = activity_level.lower()
    if activity not in ACTIVITY_MULTIPLIERS:
        raise ValueError(f"Invalid activity level: {activity_level}")
    weather = weather_condition.lower()
    if weather not in WEATHER_ADJUSTMENTS:
        raise ValueError(f"Invalid weather condition: {weather_condition}")

    base = weight_kg * ML_PER_KG
    multiplier = ACTIVITY_MULTIPLIERS[activity]
    activity_adjusted = base * multiplier
    adjustment = WEATHER_ADJUSTMENTS[weather]
    unrounded = activity_adjusted + adjustment
    goal = round_half_up(unrounded / ROUNDING_INTERVAL_ML) * ROUNDING_INTERVAL_ML

    logger.debug(
        "goal weight_kg=%s activity=%s weather=%s base=%.2f adjusted=%.2f final=%.2f goal=%.0f",
        weight_kg,
        activity,
        weather,
        base,
        activity_adjusted,
        unrounded,
        goal,
    )
    return GoalBreakdown(
        base_ml=base,
        activity_multiplier=multiplier,
        activity_adjusted_ml=activity_adjusted,
        weather_adjustment_ml=adjustment,
        unrounded_ml=unrounded,
        goal_ml=goal,
    )


def calculate_daily_water_goal(weight_kg: float, activity_level: str, weather_condition: str) -> float:
    """Calculate the daily water goal in ml, rounded to the nearest 50 ml."""
    return goal_breakdown(weight_kg, activity_level, weather_condition).goal_ml


def goal_for_profile(profile: HydrationProfile) -> float:
    return calculate_daily_water_goal(profile.weight_kg, profile.activity, profile.weather)
