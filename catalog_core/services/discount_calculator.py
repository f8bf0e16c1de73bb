"""
Discount arithmetic.

Pure functions: no side effects, no storage access. Invalid input never
raises; it yields ``None`` ("no result") and the caller decides whether
that is a form error or simply nothing to display.

Amounts are handled as ``Decimal`` and rounded half away from zero
(``ROUND_HALF_UP``), so ``percent_from_prices(100, 66.666) == 33`` and
``price_from_percent(99.99, 15) == Decimal("84.99")``.
"""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Union

Number = Union[Decimal, int, float, str]

CENT = Decimal("0.01")
HUNDRED = Decimal("100")


def _to_decimal(value) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not result.is_finite():
        return None
    return result


def _is_discount(original: Optional[Decimal], discounted: Optional[Decimal]) -> bool:
    if original is None or discounted is None:
        return False
    return original > 0 and discounted > 0 and discounted < original


def percent_from_prices(original: Number, discounted: Number) -> Optional[int]:
    """
    Discount percentage implied by two prices, rounded to a whole percent.

    Returns None unless ``0 < discounted < original``.
    """
    original, discounted = _to_decimal(original), _to_decimal(discounted)
    if not _is_discount(original, discounted):
        return None
    percent = (original - discounted) / original * HUNDRED
    return int(percent.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def price_from_percent(original: Number, percent: Number) -> Optional[Decimal]:
    """Discounted price for a percentage, rounded to cents"""
    original, percent = _to_decimal(original), _to_decimal(percent)
    if original is None or original <= 0 or not is_percent_valid(percent):
        return None
    price = original - original * percent / HUNDRED
    return price.quantize(CENT, rounding=ROUND_HALF_UP)


def savings(original: Number, discounted: Number) -> Optional[Decimal]:
    """Amount saved, rounded to cents"""
    original, discounted = _to_decimal(original), _to_decimal(discounted)
    if not _is_discount(original, discounted):
        return None
    return (original - discounted).quantize(CENT, rounding=ROUND_HALF_UP)


def is_percent_valid(percent: Optional[Number]) -> bool:
    percent = _to_decimal(percent)
    return percent is not None and 0 <= percent <= HUNDRED


def format_discount(percent: Optional[int]) -> str:
    """Short badge text, e.g. "20%"; "-" when there is no discount"""
    if not percent:
        return "-"
    return f"{percent}%"
