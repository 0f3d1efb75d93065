import json
import logging

import typer

from .goal import goal_breakdown
from .logging_config import setup_logging
from .models import HydrationProfile
from .progress import format_amount, get_progress_color, get_progress_percentage
from .units import convert_volume, convert_weight, ml_to_oz
from .validation import (
    MAX_WEIGHT_KG,
    MIN_WEIGHT_KG,
    is_unusual_weight,
    validate_activity_level,
    validate_weather_condition,
    validate_weight,
)

logger = logging.getLogger(__name__)

app = typer.Typer(help="Daily water goal utilities")


def _emit(payload: dict) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False))


def _fail(message: str, code: int = 1) -> None:
    typer.echo(message, err=True)
    raise typer.Exit(code=code)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")) -> None:
    setup_logging(verbose)


@app.command()
def goal(
    weight: float = typer.Option(..., help="Body weight"),
    unit: str = typer.Option("kg", help="Weight unit: kg, lb"),
    activity: str = typer.Option(
        "moderate",
        help="Activity level: sedentary, light, moderate, active, very_active",
    ),
    weather: str = typer.Option("mild", help="Weather: cool, cold, mild, warm, hot"),
    confirm: bool = typer.Option(False, "--confirm", help="Accept a weight below 20 kg"),
) -> None:
    """Compute the daily water goal for a person."""
    if unit.lower() not in ("kg", "lb"):
        _fail(f"Invalid weight unit: {unit}")
    if not validate_activity_level(activity):
        _fail(f"Invalid activity level: {activity}")
    if not validate_weather_condition(weather):
        _fail(f"Invalid weather condition: {weather}")
    if is_unusual_weight(weight, unit):
        if not confirm:
            _fail("Weight is below 20 kg, re-run with --confirm if this is correct", code=2)
        logger.info("computing goal for unusual weight %s %s", weight, unit)
    elif not validate_weight(weight, unit):
        _fail(f"Weight must be between {MIN_WEIGHT_KG:g} and {MAX_WEIGHT_KG:g} kg")

    try:
        profile = HydrationProfile.from_weight(weight, unit, activity, weather)
        steps = goal_breakdown(profile.weight_kg, profile.activity, profile.weather)
    except ValueError as exc:
        _fail(str(exc))

    _emit(
        {
            "weight_kg": round(profile.weight_kg, 2),
            "activity": profile.activity,
            "weather": profile.weather,
            "base_ml": round(steps.base_ml, 2),
            "activity_multiplier": steps.activity_multiplier,
            "activity_adjusted_ml": round(steps.activity_adjusted_ml, 2),
            "weather_adjustment_ml": steps.weather_adjustment_ml,
            "goal_ml": steps.goal_ml,
            "goal_oz": round(ml_to_oz(steps.goal_ml), 2),
            "formatted": format_amount(steps.goal_ml),
        }
    )


@app.command("convert-weight")
def convert_weight_cmd(
    value: float = typer.Argument(..., help="Weight to convert"),
    from_unit: str = typer.Option("kg", "--from", help="Source unit: kg, lb"),
) -> None:
    """Convert a weight between kg and lb."""
    try:
        converted = convert_weight(value, from_unit)
    except ValueError as exc:
        _fail(str(exc))
    to_unit = "lb" if from_unit.lower() == "kg" else "kg"
    _emit({"value": value, "from": from_unit.lower(), "to": to_unit, "result": round(converted, 4)})


@app.command("convert-volume")
def convert_volume_cmd(
    value: float = typer.Argument(..., help="Volume to convert"),
    direction: str = typer.Option("ml_to_oz", help="Direction: ml_to_oz, oz_to_ml"),
) -> None:
    """Convert a volume between ml and fl oz."""
    try:
        converted = convert_volume(value, direction)
    except ValueError as exc:
        _fail(str(exc))
    _emit({"value": value, "direction": direction.lower(), "result": round(converted, 4)})


@app.command()
def progress(
    current: float = typer.Argument(..., help="Water drunk so far, ml"),
    goal_ml: float = typer.Argument(..., metavar="GOAL", help="Daily goal, ml"),
) -> None:
    """Show progress toward the daily goal."""
    percentage = get_progress_percentage(current, goal_ml)
    _emit(
        {
            "current": format_amount(current),
            "goal": format_amount(goal_ml),
            "percentage": percentage,
            "color": get_progress_color(percentage),
        }
    )


if __name__ == "__main__":
    app()
