from .goal import round_half_up


def get_progress_percentage(current: float, goal: float) -> int:
    """Percent of the goal reached, capped at 100."""
    if goal == 0:
        return 0
    return min(round_half_up(current / goal * 100), 100)


def get_progress_color(percentage: float) -> str:
    if percentage < 50:
        return "#ef4444"
    if percentage < 75:
        return "#f59e0b"
    if percentage < 90:
        return "#10b981"
    return "#059669"


def format_amount(ml: float) -> str:
    if ml >= 1000:
        return f"{ml / 1000:.1f}L"
    return f"{ml:.0f}ml"
