"""Round-half-up rounding through an exact decimal intermediate"""

from decimal import ROUND_HALF_UP, Context, Decimal

from .validation import validate_decimal_places


def round_half_up(amount: float, decimal_places: int) -> float:
    """
    Round amount to decimal_places, ties away from zero

    The float is converted via its shortest repr, so 2.345 is treated as
    the decimal 2.345 and rounds to 2.35.

    Args:
        amount: Value to round
        decimal_places: Number of digits after the decimal point

    Returns:
        Rounded value as float

    Raises:
        InvalidDecimalPlacesError: decimal_places is negative
    """
    validate_decimal_places(decimal_places)

    value = Decimal(repr(float(amount)))
    if not value.is_finite():
        return float(amount)

    # quantize needs enough precision for every digit of the result
    context = Context(prec=max(value.adjusted(), 0) + decimal_places + 2)
    quantum = Decimal(1).scaleb(-decimal_places)
    return float(value.quantize(quantum, rounding=ROUND_HALF_UP, context=context))
