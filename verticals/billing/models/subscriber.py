"""Subscriber value record and status tiers."""

import math
from dataclasses import dataclass
from enum import Enum

from verticals.billing.errors import MalformedFieldError, OutOfRangeError


class SubscriptionStatus(str, Enum):
    TRIAL = "trial"
    BASIC = "basic"
    PRO = "pro"
    STUDENT = "student"

    @property
    def label(self) -> str:
        return self.value.capitalize()


# Derived predicate thresholds
MANY_DEVICES_ABOVE = 3
LONG_TERM_MONTHS = 12
LOYAL_MONTHS = 24


@dataclass(frozen=True)
class Subscriber:
    """Immutable billing record for one subscriber.

    Fields are checked on construction and never coerced into range:
    empty id/region raise MalformedFieldError, negative numbers raise
    OutOfRangeError. The region is stored trimmed and upper-cased, and a
    status may be given by its value (``"pro"``).

    Usage::

        sub = Subscriber("B-2", "us", SubscriptionStatus.PRO, 18, 4, 14.99)
        sub.region          # "US"
        sub.is_long_term    # True
    """

    id: str
    region: str
    status: SubscriptionStatus
    tenure_months: int
    devices: int
    base_price: float

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id.strip():
            raise MalformedFieldError("id", "Id cannot be null or empty", self.id)
        if not isinstance(self.region, str) or not self.region.strip():
            raise MalformedFieldError("region", "Region cannot be null or empty", self.region)
        object.__setattr__(self, "region", self.region.strip().upper())
        object.__setattr__(self, "status", _coerce_status(self.status))

        for name in ("tenure_months", "devices"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise MalformedFieldError(name, f"{name} must be an integer, got {value!r}", value)
        if isinstance(self.base_price, bool) or not isinstance(self.base_price, (int, float)):
            raise MalformedFieldError(
                "base_price", f"base_price must be a number, got {self.base_price!r}", self.base_price
            )

        if self.tenure_months < 0:
            raise OutOfRangeError(
                "tenure_months", "Tenure months must be non-negative", self.tenure_months
            )
        if self.devices < 0:
            raise OutOfRangeError("devices", "Devices must be non-negative", self.devices)
        if not math.isfinite(self.base_price) or self.base_price < 0:
            raise OutOfRangeError(
                "base_price", "Price must be finite and non-negative", self.base_price
            )
        object.__setattr__(self, "base_price", float(self.base_price))

    @property
    def has_many_devices(self) -> bool:
        return self.devices > MANY_DEVICES_ABOVE

    @property
    def is_long_term(self) -> bool:
        return self.tenure_months >= LONG_TERM_MONTHS

    @property
    def is_loyal(self) -> bool:
        return self.tenure_months >= LOYAL_MONTHS


def _coerce_status(status) -> SubscriptionStatus:
    if isinstance(status, SubscriptionStatus):
        return status
    if isinstance(status, str):
        try:
            return SubscriptionStatus(status.strip().lower())
        except ValueError:
            pass
    allowed = [s.value for s in SubscriptionStatus]
    raise MalformedFieldError(
        "status", f"Unknown subscription status {status!r}. Allowed: {allowed}", status
    )
