from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .units import lb_to_kg

ActivityLevel = Literal["sedentary", "light", "moderate", "active", "very_active"]
WeatherCondition = Literal["cool", "cold", "mild", "warm", "hot"]
WeightUnit = Literal["kg", "lb"]

ACTIVITY_LEVELS: tuple[str, ...] = ("sedentary", "light", "moderate", "active", "very_active")
WEATHER_CONDITIONS: tuple[str, ...] = ("cool", "cold", "mild", "warm", "hot")


@dataclass(frozen=True)
class HydrationProfile:
    """Minimal profile for daily water goal calculation."""

    weight_kg: float
    activity: ActivityLevel = "moderate"
    weather: WeatherCondition = "mild"

    def __post_init__(self) -> None:
        if self.weight_kg <= 0:
            raise ValueError("weight_kg must be greater than 0")
        activity = str(self.activity).lower()
        weather = str(self.weather).lower()
        if activity not in ACTIVITY_LEVELS:
            raise ValueError(f"activity must be one of: {', '.join(ACTIVITY_LEVELS)}")
        if weather not in WEATHER_CONDITIONS:
            raise ValueError(f"weather must be one of: {', '.join(WEATHER_CONDITIONS)}")
        object.__setattr__(self, "activity", activity)
        object.__setattr__(self, "weather", weather)

    @classmethod
    def from_weight(
        cls,
        weight: float,
        unit: str = "kg",
        activity: str = "moderate",
        weather: str = "mild",
    ) -> HydrationProfile:
        weight_kg = lb_to_kg(weight) if unit.lower() == "lb" else weight
        return cls(weight_kg=weight_kg, activity=activity, weather=weather)


@dataclass(frozen=True)
class GoalBreakdown:
    base_ml: float
    activity_multiplier: float
    activity_adjusted_ml: float
    weather_adjustment_ml: float
    unrounded_ml: float
    goal_ml: float
