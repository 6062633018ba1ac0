from decimal import Context, Decimal, ROUND_DOWN

# Largest magnitude a balance may reach. Arithmetic clamps here instead of raising.
MAX_AMOUNT = Decimal(2**96 - 1)
MIN_AMOUNT = MAX_AMOUNT.copy_negate()

DECIMAL_PLACES = 4
_QUANTUM = Decimal(1).scaleb(-DECIMAL_PLACES)

# Wide enough that sums of two in-range amounts at 4dp are exact.
AMOUNT_CONTEXT = Context(prec=64)


def clamp(value: Decimal) -> Decimal:
    if value > MAX_AMOUNT:
        return MAX_AMOUNT
    if value < MIN_AMOUNT:
        return MIN_AMOUNT
    return value


def saturating_add(left: Decimal, right: Decimal) -> Decimal:
    return clamp(AMOUNT_CONTEXT.add(left, right))


def saturating_sub(left: Decimal, right: Decimal) -> Decimal:
    return clamp(AMOUNT_CONTEXT.subtract(left, right))


def truncate(value: Decimal) -> Decimal:
    """Drop everything past 4 decimal places, rounding toward zero."""
    if not value.is_finite() or value.as_tuple().exponent >= -DECIMAL_PLACES:
        return value
    # Precision sized to the result so quantize never overflows the context
    digits = max(value.adjusted() + DECIMAL_PLACES + 1, 1)
    return value.quantize(_QUANTUM, rounding=ROUND_DOWN, context=Context(prec=digits))


def format_amount(value: Decimal) -> str:
    """
    Render an amount with at most 4 decimal places.

    Extra digits are truncated, not rounded. Trailing fractional zeros are
    stripped and negative zero renders as "0".
    """
    truncated = truncate(value)
    if truncated.is_zero():
        return "0"
    normalized = truncated.normalize(context=Context(prec=len(truncated.as_tuple().digits)))
    return f"{normalized:f}"
