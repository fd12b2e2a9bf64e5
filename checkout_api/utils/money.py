# checkout_api/utils/money.py

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

Money = Decimal
ZERO = Decimal("0")
CENT = Decimal("0.01")

def D(x) -> Money:
    if isinstance(x, Decimal):
        return x
    if isinstance(x, bool):
        raise InvalidOperation(f"not a money value: {x!r}")
    return Decimal(str(x or "0"))

def round_money(x: Money) -> Money:
    return D(x).quantize(CENT, rounding=ROUND_HALF_UP)

def clamp(x: Money, lo: Money, hi: Money) -> Money:
    return max(lo, min(hi, x))

def money_out(x) -> float:
    # presentation only; totals are computed on unrounded Decimals
    return float(round_money(x))
