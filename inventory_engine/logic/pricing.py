# inventory_engine/logic/pricing.py

from decimal import Decimal, ROUND_05UP, localcontext


def price_per_unit(
    total_cost: Decimal,
    quantity: int,
    decimal_places: int,
    rounding: str,
    precision: int,
) -> Decimal:
    """
    Divides a lot's total cost over its quantity.

    The result is the exact quotient rounded once to `decimal_places` using
    `rounding` (one of the decimal module's ROUND_* names), so 10.00 over 3
    units at ten places with ROUND_HALF_EVEN gives 3.3333333333.

    The division keeps at least two digits beyond `decimal_places` (and never
    fewer than `precision` significant digits) under ROUND_05UP, which leaves
    the final quantize as the only step that can move a half-way case.
    """
    if quantity <= 0:
        raise ValueError(f"Cannot price a lot of {quantity} units.")

    total_cost = Decimal(total_cost)
    # quantity >= 1, so the quotient has no more integer digits than the cost
    integer_digits = max(total_cost.adjusted() + 1, 1)

    with localcontext() as ctx:
        ctx.prec = max(precision, integer_digits + decimal_places + 2)
        ctx.rounding = ROUND_05UP
        raw = total_cost / Decimal(quantity)
        return raw.quantize(Decimal(1).scaleb(-decimal_places), rounding=rounding)
