"""Test subscription pricing."""
import pytest
from verticals.billing.errors import MissingSubscriberError
from verticals.billing.models.subscriber import Subscriber, SubscriptionStatus as S
from verticals.billing.pricing import (
    apply_status_discount,
    calc_total,
    device_surcharge,
    quote,
    regional_tax,
    select_discount,
)


def sub(region="CA", status=S.BASIC, tenure=6, devices=1, price=10.0):
    return Subscriber("P-1", region, status, tenure, devices, price)


def test_trial_is_free_whatever_the_base_price():
    assert apply_status_discount(sub(status=S.TRIAL, price=49.0)) == 0


def test_student_half_price():
    assert apply_status_discount(sub(status=S.STUDENT, price=12.0)) == 6.0


@pytest.mark.parametrize("tenure,factor,tier", [
    (30, 0.85, "pro_loyal"),
    (24, 0.85, "pro_loyal"),
    (23, 0.90, "pro_long_term"),
    (12, 0.90, "pro_long_term"),
    (11, 1.0, "none"),
])
def test_pro_discount_tiers(tenure, factor, tier):
    s = sub(status=S.PRO, tenure=tenure, price=100.0)
    assert select_discount(s).name == tier
    assert apply_status_discount(s) == pytest.approx(100.0 * factor)


def test_basic_pays_base_price():
    assert apply_status_discount(sub(status=S.BASIC, tenure=60, price=8.99)) == 8.99


def test_device_surcharge_boundary():
    assert device_surcharge(sub(devices=3)) == 0
    assert device_surcharge(sub(devices=4)) == 4.99


@pytest.mark.parametrize("region,rate", [("EU", 0.21), ("US", 0.07), ("CA", 0.0), ("UK", 0.0)])
def test_regional_tax(region, rate):
    assert regional_tax(sub(region=region), 100.0) == pytest.approx(100.0 * rate)


def test_pro_long_term_us_total():
    total = calc_total(Subscriber("B-2", "US", S.PRO, 18, 4, 14.99))
    assert total == pytest.approx(19.77467)


def test_student_eu_total():
    total = calc_total(Subscriber("C-3", "EU", S.STUDENT, 6, 2, 12.99))
    assert total == pytest.approx(7.85895)


def test_basic_untaxed_total():
    assert calc_total(Subscriber("D-4", "CA", S.BASIC, 3, 1, 8.99)) == 8.99


def test_tax_applies_after_surcharge():
    b = quote(sub(region="EU", status=S.TRIAL, price=0, devices=5, tenure=0))
    assert b.discounted == 0
    assert b.subtotal == 4.99
    assert b.tax == pytest.approx(4.99 * 0.21)
    assert b.total == pytest.approx(4.99 * 1.21)


def test_quote_breakdown_matches_total():
    s = Subscriber("B-2", "US", S.PRO, 18, 4, 14.99)
    b = quote(s)
    assert b.discount == "pro_long_term"
    assert b.discount_factor == 0.90
    assert b.discounted == pytest.approx(13.491)
    assert b.surcharge == 4.99
    assert b.tax_rate == 0.07
    assert b.total == calc_total(s)


def test_no_rounding_applied():
    total = calc_total(Subscriber("C-3", "EU", S.STUDENT, 6, 2, 12.99))
    assert total != round(total, 2)


def test_calc_total_is_idempotent():
    s = sub(status=S.PRO, tenure=30, devices=6, region="EU", price=20.0)
    assert calc_total(s) == calc_total(s)


def test_missing_subscriber_is_contract_violation():
    with pytest.raises(MissingSubscriberError):
        calc_total(None)
    with pytest.raises(TypeError):
        quote(None)


def test_missing_subscriber_is_not_a_construction_error():
    assert not issubclass(MissingSubscriberError, ValueError)
