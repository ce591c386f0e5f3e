import math

from soapcalc.presets import MIN_BATCH_WEIGHT


def format_number(x, digits=1):
    try:
        return f"{float(x):.{digits}f}"
    except (TypeError, ValueError):
        return str(x)


def coerce_number(value) -> float:
    """Parse user input as a float; anything non-numeric becomes 0."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return number


def clamp_batch_weight(value) -> float:
    return max(MIN_BATCH_WEIGHT, coerce_number(value))
