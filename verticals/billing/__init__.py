"""Billing vertical: subscription eligibility and pricing.

Demonstrates the patterns working together in one domain:
- Frozen Subscriber record with derived predicates
- Ordered, first-failure validation chain (rules engine)
- Discount decision table, device surcharge, regional tax
- FastAPI router and template engine renderer
- Dataclass configuration
"""

from verticals.billing.errors import (
    MalformedFieldError,
    MissingSubscriberError,
    OutOfRangeError,
    SubscriberError,
)
from verticals.billing.models.subscriber import Subscriber, SubscriptionStatus
from verticals.billing.pricing import PriceBreakdown, calc_total, quote
from verticals.billing.rules import audit, evaluate, validate
from verticals.billing.service import BillingDecision, bill

__all__ = [
    "BillingDecision",
    "MalformedFieldError",
    "MissingSubscriberError",
    "OutOfRangeError",
    "PriceBreakdown",
    "Subscriber",
    "SubscriberError",
    "SubscriptionStatus",
    "audit",
    "bill",
    "calc_total",
    "evaluate",
    "quote",
    "validate",
]
