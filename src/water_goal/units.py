"""Weight and volume conversions.

The ml/oz factors are independent literals and are not exact reciprocals of
each other, so a round trip through both drifts by roughly 0.02%.
"""

KG_TO_LB = 2.20462
ML_TO_OZ = 0.033814
OZ_TO_ML = 29.5735


def kg_to_lb(kg: float) -> float:
    return kg * KG_TO_LB


def lb_to_kg(lb: float) -> float:
    return lb / KG_TO_LB


def ml_to_oz(ml: float) -> float:
    return ml * ML_TO_OZ


def oz_to_ml(oz: float) -> float:
    return oz * OZ_TO_ML


def convert_weight(value: float, from_unit: str) -> float:
    """Convert a weight into the other unit: kg -> lb or lb -> kg."""
    unit = from_unit.lower()
    if unit == "kg":
        return kg_to_lb(value)
    if unit == "lb":
        return lb_to_kg(value)
    raise ValueError(f"Invalid weight unit: {from_unit}")


def convert_volume(value: float, direction: str) -> float:
    """Convert a volume, direction is ``ml_to_oz`` or ``oz_to_ml``."""
    normalized = direction.lower()
    if normalized == "ml_to_oz":
        return ml_to_oz(value)
    if normalized == "oz_to_ml":
        return oz_to_ml(value)
    raise ValueError(f"Invalid volume direction: {direction}")
