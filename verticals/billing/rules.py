"""Billing eligibility rules: pure functions.

The validation chain is an ordered list of named rules. The first rule
that fails decides the outcome, so the order below is part of the
contract: region, then common limits, then status-specific limits.
"""

from functools import lru_cache
from typing import Optional

from patterns.domain_config import BillingConfig, ValidationConfig
from patterns.rules_engine import (
    Rule,
    RuleResult,
    RuleSetResult,
    evaluate_all,
    first_failure,
)
from verticals.billing.models.subscriber import Subscriber, SubscriptionStatus

MISSING_SUBSCRIBER = "Subscriber is missing"

_DEFAULT_CONFIG = BillingConfig.default()


def _status_is(status: SubscriptionStatus):
    return lambda s: s.status is status


# ---------------------------------------------------------------------------
# Chain definition
# ---------------------------------------------------------------------------

@lru_cache(maxsize=8)
def build_validation_chain(v: ValidationConfig) -> tuple[Rule, ...]:
    """Build the ordered validation chain for a set of limits."""
    supported = ", ".join(sorted(v.supported_regions))

    return (
        Rule(
            name="region_supported",
            violated=lambda s: s.region not in v.supported_regions,
            message=lambda s: f"Region '{s.region}' is not supported (supported: {supported})",
            details=lambda s: {"region": s.region},
        ),
        # -- common rules --
        Rule(
            name="max_devices",
            violated=lambda s: s.devices > v.max_devices,
            message=lambda s: (
                f"{s.devices} devices registered: maximum {v.max_devices} devices allowed"
            ),
            details=lambda s: {"devices": s.devices, "max_devices": v.max_devices},
        ),
        Rule(
            name="min_devices",
            violated=lambda s: s.devices < v.min_devices,
            message=lambda s: f"{s.devices} devices registered: at least one device required",
            details=lambda s: {"devices": s.devices},
        ),
        Rule(
            name="positive_base_price",
            violated=lambda s: s.status is not SubscriptionStatus.TRIAL and s.base_price <= 0,
            message=lambda s: (
                f"Base price {s.base_price:.2f} for {s.status.label}: "
                "non-trial subscriptions must have positive base price"
            ),
            details=lambda s: {"base_price": s.base_price, "status": s.status.value},
        ),
        Rule(
            name="high_value_approval",
            violated=lambda s: (
                s.region in v.taxable_regions and s.base_price > v.high_value_threshold
            ),
            message=lambda s: (
                f"Base price {s.base_price:.2f} in {s.region}: "
                "high-value subscriptions in taxable regions require special approval"
            ),
            details=lambda s: {
                "base_price": s.base_price,
                "region": s.region,
                "threshold": v.high_value_threshold,
            },
        ),
        # -- status-specific rules --
        Rule(
            name="trial_max_tenure",
            applies_to=_status_is(SubscriptionStatus.TRIAL),
            violated=lambda s: s.tenure_months > v.trial_max_tenure_months,
            message=lambda s: (
                f"Tenure {s.tenure_months} months: "
                f"trial cannot exceed {v.trial_max_tenure_months} month"
            ),
            details=lambda s: {"tenure_months": s.tenure_months},
        ),
        Rule(
            name="trial_zero_price",
            applies_to=_status_is(SubscriptionStatus.TRIAL),
            violated=lambda s: s.base_price > 0,
            message=lambda s: (
                f"Base price {s.base_price:.2f}: trial must have zero base price"
            ),
            details=lambda s: {"base_price": s.base_price},
        ),
        Rule(
            name="student_max_tenure",
            applies_to=_status_is(SubscriptionStatus.STUDENT),
            violated=lambda s: s.tenure_months > v.student_max_tenure_months,
            message=lambda s: (
                f"Tenure {s.tenure_months} months: "
                f"student cannot exceed {v.student_max_tenure_months} months"
            ),
            details=lambda s: {"tenure_months": s.tenure_months},
        ),
        Rule(
            name="pro_min_tenure",
            applies_to=_status_is(SubscriptionStatus.PRO),
            violated=lambda s: s.tenure_months < v.pro_min_tenure_months,
            message=lambda s: (
                f"Tenure {s.tenure_months} months: "
                f"Pro requires minimum {v.pro_min_tenure_months} months tenure"
            ),
            details=lambda s: {"tenure_months": s.tenure_months},
        ),
    )


# ---------------------------------------------------------------------------
# Public operations
# ---------------------------------------------------------------------------

def evaluate(
    subscriber: Optional[Subscriber],
    config: BillingConfig = _DEFAULT_CONFIG,
) -> RuleResult:
    """Run the validation chain and return the first failing rule's result."""
    if subscriber is None:
        return RuleResult(passed=False, rule_name="subscriber_present", message=MISSING_SUBSCRIBER)
    return first_failure(build_validation_chain(config.validation), subscriber)


def validate(
    subscriber: Optional[Subscriber],
    config: BillingConfig = _DEFAULT_CONFIG,
) -> tuple[bool, str]:
    """Decide whether a subscriber is billable.

    Returns ``(True, "")`` when every rule passes, otherwise ``(False, reason)``
    naming the first violated rule.
    """
    result = evaluate(subscriber, config)
    return result.passed, result.message


def audit(
    subscriber: Optional[Subscriber],
    config: BillingConfig = _DEFAULT_CONFIG,
) -> RuleSetResult:
    """Run every applicable rule and report all violations.

    Diagnostic view only; validate() still reports just the first failure.
    """
    if subscriber is None:
        return RuleSetResult(all_passed=False, results=[evaluate(None, config)])
    return evaluate_all(build_validation_chain(config.validation), subscriber)
