"""Dataclass-based domain configuration pattern.

Each vertical defines its thresholds, limits, and rates as a frozen
dataclass. This gives you:
- Type safety (IDE autocompletion, mypy checking)
- Default values (sensible out-of-the-box)
- Immutability (frozen=True prevents accidental mutation)

Example domain: subscription billing with validation and pricing config.
"""

from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Nested config sections
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ValidationConfig:
    """Eligibility limits for billable subscribers."""

    supported_regions: frozenset[str] = frozenset({"EU", "US", "CA", "UK", "AU", "FR"})
    taxable_regions: frozenset[str] = frozenset({"EU", "US"})
    max_devices: int = 10
    min_devices: int = 1
    high_value_threshold: float = 1000.0  # needs approval in taxable regions
    trial_max_tenure_months: int = 1
    student_max_tenure_months: int = 48
    pro_min_tenure_months: int = 3


@dataclass(frozen=True)
class PricingConfig:
    """Discount factors, surcharges and regional tax rates."""

    trial_factor: float = 0.0
    student_factor: float = 0.5
    pro_loyal_factor: float = 0.85
    pro_long_term_factor: float = 0.90
    device_surcharge: float = 4.99
    tax_rates: dict[str, float] = field(
        default_factory=lambda: {"EU": 0.21, "US": 0.07}
    )

    def tax_rate(self, region: str) -> float:
        return self.tax_rates.get(region, 0.0)


# ---------------------------------------------------------------------------
# Top-level domain config
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BillingConfig:
    """Complete configuration for the billing vertical.

    Usage::

        config = BillingConfig.default()
        if subscriber.region not in config.validation.supported_regions:
            reject(subscriber)
    """

    validation: ValidationConfig = field(default_factory=ValidationConfig)
    pricing: PricingConfig = field(default_factory=PricingConfig)

    @classmethod
    def default(cls) -> "BillingConfig":
        """Create config with all defaults."""
        return cls()
