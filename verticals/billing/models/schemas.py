"""Pydantic schemas for API request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from verticals.billing.models.subscriber import Subscriber, SubscriptionStatus


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class SubscriberIn(BaseModel):
    id: str = Field(..., min_length=1, max_length=64)
    region: str = Field(..., min_length=1, max_length=8)
    status: SubscriptionStatus
    tenure_months: int = Field(..., ge=0)
    devices: int = Field(..., ge=0)
    base_price: float = Field(..., ge=0, allow_inf_nan=False)

    @field_validator("status", mode="before")
    @classmethod
    def lower_status(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    def to_subscriber(self) -> Subscriber:
        return Subscriber(
            id=self.id,
            region=self.region,
            status=self.status,
            tenure_months=self.tenure_months,
            devices=self.devices,
            base_price=self.base_price,
        )


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class ValidationResponse(BaseModel):
    ok: bool
    reason: str = ""
    rule: Optional[str] = None


class BreakdownResponse(BaseModel):
    base_price: float
    discount: str
    discount_factor: float
    discounted: float
    surcharge: float
    subtotal: float
    tax_rate: float
    tax: float
    total: float


class QuoteResponse(BaseModel):
    subscriber_id: str
    ok: bool
    reason: str = ""
    rule: Optional[str] = None
    total: Optional[float] = None
    breakdown: Optional[BreakdownResponse] = None


class RegionsResponse(BaseModel):
    supported: list[str]
    taxable: list[str]
    tax_rates: dict[str, float]
