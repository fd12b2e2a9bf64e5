# checkout_api/pricing/delivery.py
from __future__ import annotations
from dataclasses import dataclass

from .errors import DeliveryOptionNotFound
from .types import DeliveryOptionRecord


@dataclass(frozen=True)
class CartProfile:
    """What delivery eligibility is evaluated against."""
    total_weight_grams: int | None = None
    region: str | None = None


def is_eligible(option: DeliveryOptionRecord, profile: CartProfile) -> bool:
    region = (profile.region or "").strip().upper()
    # unknown region or weight: that criterion is not applied
    if option.regions and region and region not in option.regions:
        return False
    w = profile.total_weight_grams
    if w is None:
        return True
    if option.min_weight_grams is not None and w < option.min_weight_grams:
        return False
    if option.max_weight_grams is not None and w > option.max_weight_grams:
        return False
    return True


class DeliveryOptionResolver:
    def __init__(self, repo):
        self.repo = repo

    def list(self, profile: CartProfile | None = None) -> list[DeliveryOptionRecord]:
        options = self.repo.list_delivery_options()
        if profile is None:
            return list(options)
        return [o for o in options if is_eligible(o, profile)]

    def get_by_id(self, delivery_id: str, profile: CartProfile | None = None) -> DeliveryOptionRecord:
        for o in self.list(profile):
            if o.id == delivery_id:
                return o
        raise DeliveryOptionNotFound(delivery_id)
