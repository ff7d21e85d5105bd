"""Subscription pricing: pure functions.

Three stages, always in this order:

1. Status discount: replaces the base price (decision table by status)
2. Device surcharge: flat fee for subscribers with many devices
3. Regional tax: percentage of the stage-2 price

Pricing assumes the subscriber already passed validate(); it does not
re-check eligibility.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from patterns.domain_config import BillingConfig, PricingConfig
from verticals.billing.errors import MissingSubscriberError
from verticals.billing.models.subscriber import Subscriber, SubscriptionStatus

_DEFAULT_CONFIG = BillingConfig.default()


# ---------------------------------------------------------------------------
# Discount decision table
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DiscountTier:
    """One row of the discount table: first matching tier wins."""

    name: str
    matches: Callable[[Subscriber], bool]
    factor: float


def _always(_: Subscriber) -> bool:
    return True


def discount_table(
    pricing: PricingConfig,
) -> dict[SubscriptionStatus, tuple[DiscountTier, ...]]:
    """Discount tiers per status, in priority order.

    Statuses missing from the table pay the base price. Pro checks loyal
    before long-term since every loyal subscriber is also long-term.
    """
    return {
        SubscriptionStatus.TRIAL: (
            DiscountTier("trial", _always, pricing.trial_factor),
        ),
        SubscriptionStatus.STUDENT: (
            DiscountTier("student", _always, pricing.student_factor),
        ),
        SubscriptionStatus.PRO: (
            DiscountTier("pro_loyal", lambda s: s.is_loyal, pricing.pro_loyal_factor),
            DiscountTier("pro_long_term", lambda s: s.is_long_term, pricing.pro_long_term_factor),
        ),
    }


NO_DISCOUNT = DiscountTier("none", _always, 1.0)


def select_discount(
    subscriber: Subscriber,
    pricing: PricingConfig = _DEFAULT_CONFIG.pricing,
) -> DiscountTier:
    """Return the first tier of the subscriber's status that matches."""
    for tier in discount_table(pricing).get(subscriber.status, ()):
        if tier.matches(subscriber):
            return tier
    return NO_DISCOUNT


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------

def apply_status_discount(
    subscriber: Subscriber,
    pricing: PricingConfig = _DEFAULT_CONFIG.pricing,
) -> float:
    tier = select_discount(subscriber, pricing)
    if tier.factor == 0:
        return 0.0
    return subscriber.base_price * tier.factor


def device_surcharge(
    subscriber: Subscriber,
    pricing: PricingConfig = _DEFAULT_CONFIG.pricing,
) -> float:
    return pricing.device_surcharge if subscriber.has_many_devices else 0.0


def regional_tax(
    subscriber: Subscriber,
    price: float,
    pricing: PricingConfig = _DEFAULT_CONFIG.pricing,
) -> float:
    """Tax owed on ``price`` for the subscriber's region (0 when untaxed)."""
    return price * pricing.tax_rate(subscriber.region)


# ---------------------------------------------------------------------------
# Public operations
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PriceBreakdown:
    """Every intermediate value of one pricing run."""

    base_price: float
    discount: str
    discount_factor: float
    discounted: float
    surcharge: float
    subtotal: float
    tax_rate: float
    tax: float
    total: float


def quote(
    subscriber: Optional[Subscriber],
    config: BillingConfig = _DEFAULT_CONFIG,
) -> PriceBreakdown:
    """Price a validated subscriber and keep each stage's output.

    Raises MissingSubscriberError when ``subscriber`` is None.
    """
    if subscriber is None:
        raise MissingSubscriberError("quote")

    pricing = config.pricing
    tier = select_discount(subscriber, pricing)
    discounted = apply_status_discount(subscriber, pricing)
    surcharge = device_surcharge(subscriber, pricing)
    subtotal = discounted + surcharge
    tax = regional_tax(subscriber, subtotal, pricing)

    return PriceBreakdown(
        base_price=subscriber.base_price,
        discount=tier.name,
        discount_factor=tier.factor,
        discounted=discounted,
        surcharge=surcharge,
        subtotal=subtotal,
        tax_rate=pricing.tax_rate(subscriber.region),
        tax=tax,
        total=subtotal + tax,
    )


def calc_total(
    subscriber: Optional[Subscriber],
    config: BillingConfig = _DEFAULT_CONFIG,
) -> float:
    """Final charge for a validated subscriber, unrounded."""
    if subscriber is None:
        raise MissingSubscriberError("calc_total")
    return quote(subscriber, config).total
