"""Sample billing run.

Builds a fixed set of subscribers, bills each one and prints one line per
subscriber::

    python -m verticals.billing.demo
    billing-demo --breakdown
"""

import click

from core.engine.template_engine import TemplateEngine
from core.observability.log_setup import configure_logging
from verticals.billing.models.subscriber import Subscriber, SubscriptionStatus
from verticals.billing.renderer import render_breakdown
from verticals.billing.service import bill


def sample_subscribers() -> list[Subscriber]:
    return [
        Subscriber("A-1", "US", SubscriptionStatus.TRIAL, 0, 1, 9.99),
        Subscriber("B-2", "US", SubscriptionStatus.PRO, 18, 4, 14.99),
        Subscriber("C-3", "EU", SubscriptionStatus.STUDENT, 6, 2, 12.99),
        Subscriber("D-4", "CA", SubscriptionStatus.BASIC, 3, 1, 8.99),
        Subscriber("E-5", "XX", SubscriptionStatus.BASIC, 1, 1, 5.99),
        Subscriber("G-7", "US", SubscriptionStatus.PRO, 1, 15, 9.99),
    ]


@click.command()
@click.option("--breakdown", is_flag=True, help="Show every pricing stage.")
@click.option("--log-level", default="WARNING", show_default=True, help="Log level.")
def main(breakdown: bool, log_level: str) -> None:
    """Validate and price the sample subscribers."""
    configure_logging(log_level)
    for subscriber in sample_subscribers():
        decision = bill(subscriber)
        if breakdown:
            click.echo(render_breakdown(decision))
        else:
            click.echo(TemplateEngine.render(decision, vertical="billing"))


if __name__ == "__main__":
    main()
