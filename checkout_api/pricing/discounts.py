# checkout_api/pricing/discounts.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Union, assert_never

from ..utils.money import D, Money, ZERO, clamp
from .errors import InternalDataError

HUNDRED = D(100)


@dataclass(frozen=True)
class NoDiscount:
    kind = "none"

    @property
    def value(self) -> Money:
        return ZERO


@dataclass(frozen=True)
class Percent:
    value: Money
    kind = "percent"


@dataclass(frozen=True)
class Amount:
    value: Money
    kind = "amount"


Discount = Union[NoDiscount, Percent, Amount]

# stored kinds; "fixed" is the legacy spelling of "amount"
_KINDS = {
    None: NoDiscount,
    "": NoDiscount,
    "none": NoDiscount,
    "percent": Percent,
    "amount": Amount,
    "fixed": Amount,
}


def parse_discount(kind: str | None, value) -> Discount:
    """Turn a stored (kind, value) pair into a discount variant.

    Unknown kinds raise InternalDataError; a zero or negative value is the
    same as no discount.
    """
    key = kind.strip().lower() if isinstance(kind, str) else kind
    if key not in _KINDS:
        raise InternalDataError(f"unknown discount kind {kind!r}")
    cls = _KINDS[key]
    if cls is NoDiscount:
        return NoDiscount()
    v = D(value)
    if v <= 0:
        return NoDiscount()
    return cls(v)


def discounted_price(price: Money, discount: Discount) -> Money:
    """Unit price after discount, never below zero."""
    price = D(price)
    if isinstance(discount, NoDiscount):
        final_ = price
    elif isinstance(discount, Percent):
        pct = clamp(discount.value, ZERO, HUNDRED)
        final_ = price * (1 - pct / HUNDRED)
    elif isinstance(discount, Amount):
        final_ = price - discount.value
    else:
        assert_never(discount)
    return max(ZERO, final_)


def discount_amount(base: Money, discount: Discount) -> Money:
    """Amount taken off ``base``, capped so it never exceeds it."""
    base = max(ZERO, D(base))
    return base - discounted_price(base, discount)
