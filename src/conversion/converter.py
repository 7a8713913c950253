# src/conversion/converter.py

"""Apply the local conversion rate to a price."""

import math
from decimal import ROUND_HALF_UP, Decimal

_CENTS = Decimal("0.01")


def convert_to_local_currency(price: float, rate: float) -> float:
    """Multiply *price* by *rate*, rounded half-up to two decimal places.

    The exact binary value of the product is rounded, so ties such as
    ``10.25 * 0.5`` go up (5.13).  NaN and infinities pass through.
    """
    product = float(price) * float(rate)
    if not math.isfinite(product):
        return product
    return float(Decimal(product).quantize(_CENTS, rounding=ROUND_HALF_UP))
