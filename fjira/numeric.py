"""Small numeric helpers."""


def clamp(value: int, lower: int, upper: int) -> int:
    """Limit value to [lower, upper]; upper wins when the range is empty."""
    if value > upper:
        return upper
    if value < lower:
        return lower
    return value