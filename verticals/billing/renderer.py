"""Template engine renderer for the billing vertical.

Turns a BillingDecision into the one-line console summary used by the
sample driver.
"""

from core.engine.template_engine import fmt_money, fmt_pct, register_renderer
from verticals.billing.service import BillingDecision


def render_billing(decision: BillingDecision) -> str:
    """Render a billing decision as a single line."""
    sub = decision.subscriber
    if not decision.ok:
        return f"Error for {sub.id}: {decision.reason}"
    return (
        f"Subscriber {sub.id}: {fmt_money(decision.total)} "
        f"(Status: {sub.status.label}, "
        f"Tenure: {sub.tenure_months} months, "
        f"Devices: {sub.devices})"
    )


def render_breakdown(decision: BillingDecision) -> str:
    """Render each pricing stage, one per line."""
    b = decision.breakdown
    if b is None:
        return render_billing(decision)
    return "\n".join([
        render_billing(decision),
        f"  base      {fmt_money(b.base_price)}",
        f"  discount  {b.discount} x{b.discount_factor:g} -> {fmt_money(b.discounted)}",
        f"  devices   +{fmt_money(b.surcharge)}",
        f"  tax       {fmt_pct(b.tax_rate)} +{fmt_money(b.tax)}",
    ])


# Auto-register on import
register_renderer("billing", render_billing)
