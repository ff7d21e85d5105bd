"""Test the billing flow, rendering and the sample driver."""
import pytest
from click.testing import CliRunner
from core.engine.template_engine import TemplateEngine, fmt_money, fmt_pct, render_generic
from verticals.billing.demo import main, sample_subscribers
from verticals.billing.errors import MissingSubscriberError
from verticals.billing.models.subscriber import Subscriber, SubscriptionStatus as S
from verticals.billing.renderer import render_billing, render_breakdown
from verticals.billing.service import bill


def test_bill_rejected_has_no_total():
    decision = bill(Subscriber("E-5", "XX", S.BASIC, 1, 1, 5.99))
    assert not decision.ok
    assert decision.rule == "region_supported"
    assert decision.total is None
    assert decision.breakdown is None


def test_bill_priced():
    decision = bill(Subscriber("B-2", "US", S.PRO, 18, 4, 14.99))
    assert decision.ok
    assert decision.reason == ""
    assert decision.total == pytest.approx(19.77467)


def test_bill_requires_subscriber():
    with pytest.raises(MissingSubscriberError):
        bill(None)


def test_render_priced_line():
    decision = bill(Subscriber("B-2", "US", S.PRO, 18, 4, 14.99))
    assert render_billing(decision) == (
        "Subscriber B-2: $19.77 (Status: Pro, Tenure: 18 months, Devices: 4)"
    )


def test_render_rejected_line():
    decision = bill(Subscriber("A-1", "US", S.TRIAL, 0, 1, 9.99))
    line = render_billing(decision)
    assert line.startswith("Error for A-1: ")
    assert "trial must have zero base price" in line


def test_render_breakdown_lists_stages():
    decision = bill(Subscriber("C-3", "EU", S.STUDENT, 6, 2, 12.99))
    text = render_breakdown(decision)
    assert "student x0.5" in text
    assert "21%" in text
    assert text.splitlines()[0] == (
        "Subscriber C-3: $7.86 (Status: Student, Tenure: 6 months, Devices: 2)"
    )


def test_engine_dispatches_to_billing_renderer():
    assert "billing" in TemplateEngine.list_verticals()
    decision = bill(Subscriber("D-4", "CA", S.BASIC, 3, 1, 8.99))
    assert TemplateEngine.render(decision, vertical="billing") == render_billing(decision)


def test_engine_generic_fallback():
    assert TemplateEngine.render({"total": 1.5, "id": "x"}, vertical="unknown") == "total=1.50, id=x"
    assert render_generic({"error": "boom"}) == "Error: boom"


def test_formatting_helpers():
    assert fmt_money(1234.5) == "$1,234.50"
    assert fmt_money(None) == "N/A"
    assert fmt_pct(0.07) == "7%"


def test_sample_subscribers_construct():
    ids = [s.id for s in sample_subscribers()]
    assert ids == ["A-1", "B-2", "C-3", "D-4", "E-5", "G-7"]


def test_demo_output():
    result = CliRunner().invoke(main, [])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 6
    assert lines[1] == "Subscriber B-2: $19.77 (Status: Pro, Tenure: 18 months, Devices: 4)"
    assert lines[3] == "Subscriber D-4: $8.99 (Status: Basic, Tenure: 3 months, Devices: 1)"
    assert lines[4].startswith("Error for E-5: Region 'XX'")
    assert "maximum 10 devices allowed" in lines[5]


def test_demo_breakdown_flag():
    result = CliRunner().invoke(main, ["--breakdown"])
    assert result.exit_code == 0
    assert "pro_long_term x0.9" in result.output
