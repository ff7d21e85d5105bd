"""Billing API router: validation and quotes.

Rejected subscribers are a normal outcome and come back with HTTP 200
and ``ok: false``. Only payloads that cannot form a Subscriber at all
get a 422.
"""

from dataclasses import asdict

from fastapi import APIRouter, HTTPException

from core.observability.log_setup import get_logger
from patterns.domain_config import BillingConfig
from verticals.billing.errors import SubscriberError
from verticals.billing.models.schemas import (
    BreakdownResponse,
    QuoteResponse,
    RegionsResponse,
    SubscriberIn,
    ValidationResponse,
)
from verticals.billing.models.subscriber import Subscriber
from verticals.billing.rules import evaluate
from verticals.billing.service import bill

logger = get_logger(__name__)

router = APIRouter()

config = BillingConfig.default()


def _build_subscriber(payload: SubscriberIn) -> Subscriber:
    try:
        return payload.to_subscriber()
    except SubscriberError as e:
        logger.warning("subscriber_malformed", field=e.field, error=str(e))
        raise HTTPException(
            status_code=422,
            detail={"field": e.field, "message": str(e)},
        )


@router.post("/validate", response_model=ValidationResponse)
async def validate_subscriber(payload: SubscriberIn):
    """Run the eligibility chain and report the first violated rule."""
    result = evaluate(_build_subscriber(payload), config)
    return ValidationResponse(
        ok=result.passed,
        reason=result.message,
        rule=None if result.passed else result.rule_name,
    )


@router.post("/quote", response_model=QuoteResponse)
async def quote_subscriber(payload: SubscriberIn):
    """Validate, then price an eligible subscriber with a stage breakdown."""
    decision = bill(_build_subscriber(payload), config)
    breakdown = (
        BreakdownResponse(**asdict(decision.breakdown)) if decision.breakdown else None
    )
    return QuoteResponse(
        subscriber_id=decision.subscriber.id,
        ok=decision.ok,
        reason=decision.reason,
        rule=decision.rule,
        total=decision.total,
        breakdown=breakdown,
    )


@router.get("/regions", response_model=RegionsResponse)
async def list_regions():
    return RegionsResponse(
        supported=sorted(config.validation.supported_regions),
        taxable=sorted(config.validation.taxable_regions),
        tax_rates=dict(config.pricing.tax_rates),
    )
