import json

from typer.testing import CliRunner

from water_goal.cli import app

runner = CliRunner()


def test_goal_command() -> None:
    result = runner.invoke(app, ["goal", "--weight", "70", "--activity", "moderate", "--weather", "hot"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["goal_ml"] == 3550.0
    assert payload["base_ml"] == 2450.0
    assert payload["formatted"] == "3.5L"


def test_goal_command_in_pounds() -> None:
    result = runner.invoke(app, ["goal", "--weight", "154.324", "--unit", "lb", "--weather", "cool"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["weight_kg"] == 70.0
    assert payload["goal_ml"] == 2950.0


def test_goal_command_rejects_invalid_input() -> None:
    result = runner.invoke(app, ["goal", "--weight", "70", "--activity", "lazy"])
    assert result.exit_code == 1
    assert "Invalid activity level" in result.output

    result = runner.invoke(app, ["goal", "--weight", "350"])
    assert result.exit_code == 1


def test_goal_command_needs_confirmation_for_unusual_weight() -> None:
    result = runner.invoke(app, ["goal", "--weight", "15"])
    assert result.exit_code == 2
    assert "--confirm" in result.output

    confirmed = runner.invoke(app, ["goal", "--weight", "15", "--confirm"])
    assert confirmed.exit_code == 0
    assert json.loads(confirmed.stdout)["goal_ml"] == 850.0


def test_convert_commands() -> None:
    weight = runner.invoke(app, ["convert-weight", "70", "--from", "kg"])
    assert weight.exit_code == 0
    assert json.loads(weight.stdout)["result"] == 154.3234

    volume = runner.invoke(app, ["convert-volume", "10", "--direction", "oz_to_ml"])
    assert volume.exit_code == 0
    assert json.loads(volume.stdout)["result"] == 295.735

    bad = runner.invoke(app, ["convert-weight", "70", "--from", "stone"])
    assert bad.exit_code == 1


def test_progress_command() -> None:
    result = runner.invoke(app, ["progress", "1725", "3450"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload == {"current": "1.7L", "goal": "3.5L", "percentage": 50, "color": "#f59e0b"}
