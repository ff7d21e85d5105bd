"""Billing flow: validate first, price only what passes."""

from dataclasses import dataclass
from typing import Optional

from core.observability.log_setup import get_logger
from patterns.domain_config import BillingConfig
from verticals.billing.errors import MissingSubscriberError
from verticals.billing.models.subscriber import Subscriber
from verticals.billing.pricing import PriceBreakdown, quote
from verticals.billing.rules import evaluate

logger = get_logger(__name__)

_DEFAULT_CONFIG = BillingConfig.default()


@dataclass(frozen=True)
class BillingDecision:
    """Outcome of billing one subscriber.

    ``total`` and ``breakdown`` are None when the subscriber was rejected.
    """

    subscriber: Subscriber
    ok: bool
    reason: str = ""
    rule: Optional[str] = None
    breakdown: Optional[PriceBreakdown] = None

    @property
    def total(self) -> Optional[float]:
        return self.breakdown.total if self.breakdown else None


def bill(
    subscriber: Optional[Subscriber],
    config: BillingConfig = _DEFAULT_CONFIG,
) -> BillingDecision:
    """Validate a subscriber and, if eligible, price it."""
    if subscriber is None:
        raise MissingSubscriberError("bill")

    result = evaluate(subscriber, config)
    if not result.passed:
        logger.info(
            "subscriber_rejected",
            subscriber_id=subscriber.id,
            rule=result.rule_name,
            reason=result.message,
        )
        return BillingDecision(
            subscriber=subscriber,
            ok=False,
            reason=result.message,
            rule=result.rule_name,
        )

    breakdown = quote(subscriber, config)
    logger.info(
        "subscriber_priced",
        subscriber_id=subscriber.id,
        discount=breakdown.discount,
        total=breakdown.total,
    )
    return BillingDecision(subscriber=subscriber, ok=True, breakdown=breakdown)
