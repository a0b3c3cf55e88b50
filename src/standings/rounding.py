"""Fixed-point rounding for reported figures."""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, places: int = 1) -> float:
    """Round *value* half-up on its exact binary value.

    Unlike the builtin ``round`` (which rounds half to even), a stored
    2.25 becomes 2.3. A float such as 0.15 is really 0.1499..., so it
    still becomes 0.1.

    Examples:
        2.25  -> 2.3
        0.15  -> 0.1
        33.35 -> 33.4  (stored as 33.350000000000001...)
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def percentage(part: int, whole: int, places: int = 1) -> float:
    """``part`` as a percentage of ``whole``; 0.0 when ``whole`` is 0."""
    if not whole:
        return 0.0
    return round_half_up((part / whole) * 100, places)


def mean(values, places: int = 1) -> float:
    """Arithmetic mean of *values*; 0.0 for an empty sequence."""
    values = list(values)
    if not values:
        return 0.0
    return round_half_up(sum(values) / len(values), places)
