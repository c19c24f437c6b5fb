"""Unit tests for the trip pricing model.

Covers:
- Worked estimates for known destinations
- Half-up rounding in decimal arithmetic
- Determinism, monotonicity and style ordering
- Pricing table invariants and immutability
"""

from decimal import Decimal
from types import SimpleNamespace

import pytest

from wanderlux.forms.schemas import TripRequest
from wanderlux.pricing import PRICING_TABLE, PricingTable, estimate, subtotal


def make_request(destination="bali", travellers=2, days=5, style="standard") -> TripRequest:
    return TripRequest(
        destination=destination,
        traveller_count=travellers,
        day_count=days,
        style=style,
    )


def test_bali_standard_rounds_half_up():
    assert subtotal("bali", 2, 5) == Decimal(2150)
    # 2150 × 1.15 = 2472.5
    assert estimate(make_request()) == 2473


def test_tokyo_luxury():
    assert subtotal("tokyo", 1, 3) == Decimal(1560)
    assert estimate(make_request("tokyo", 1, 3, "luxury")) == 2262


@pytest.mark.parametrize(
    "destination,travellers,days,style,expected",
    [
        ("paris", 1, 1, "budget", 909),
        ("sydney", 3, 7, "budget", 4518),
        ("paris", 2, 10, "luxury", 11383),
    ],
)
def test_other_destinations(destination, travellers, days, style, expected):
    assert estimate(make_request(destination, travellers, days, style)) == expected


def test_fractional_counts_are_priced_as_entered():
    # 180 × 2.5 × 2 + 350 = 1250, × 1.15 = 1437.5
    assert estimate(make_request("bali", 2.5, 2, "standard")) == 1438


def test_estimate_is_deterministic():
    request = make_request("sydney", 4, 9, "luxury")
    results = {estimate(request) for _ in range(20)}
    assert len(results) == 1
    assert isinstance(results.pop(), int)


@pytest.mark.parametrize("destination", ["bali", "tokyo", "paris", "sydney"])
@pytest.mark.parametrize("style", ["budget", "standard", "luxury"])
def test_estimate_is_monotonic_in_counts(destination, style):
    for count in range(1, 8):
        base = estimate(make_request(destination, count, count, style))
        assert estimate(make_request(destination, count + 1, count, style)) >= base
        assert estimate(make_request(destination, count, count + 1, style)) >= base


@pytest.mark.parametrize("destination", ["bali", "tokyo", "paris", "sydney"])
def test_style_ordering(destination):
    budget = estimate(make_request(destination, 2, 4, "budget"))
    standard = estimate(make_request(destination, 2, 4, "standard"))
    luxury = estimate(make_request(destination, 2, 4, "luxury"))
    assert luxury >= standard >= budget > 0


def test_unknown_destination_is_a_programming_error():
    request = SimpleNamespace(destination="london", traveller_count=1, day_count=1, style="budget")
    with pytest.raises(KeyError):
        estimate(request)


def test_pricing_table_is_read_only():
    with pytest.raises(TypeError):
        PRICING_TABLE.daily_rates["bali"] = 1
    assert PRICING_TABLE.daily_rates["bali"] == 180


def test_pricing_table_covers_every_destination_and_style():
    assert set(PRICING_TABLE.daily_rates) == set(PRICING_TABLE.trip_fees)
    assert set(PRICING_TABLE.style_multipliers) == set(PRICING_TABLE.style_labels)
    assert PRICING_TABLE.destinations == ("bali", "tokyo", "paris", "sydney")


def test_pricing_table_rejects_missing_fee():
    with pytest.raises(ValueError):
        PricingTable(
            daily_rates={"bali": 180, "tokyo": 320},
            trip_fees={"bali": 350},
            style_multipliers={"budget": Decimal("0.9")},
            style_labels={"budget": "Budget"},
        )


def test_pricing_table_rejects_unlabelled_style():
    with pytest.raises(ValueError):
        PricingTable(
            daily_rates={"bali": 180},
            trip_fees={"bali": 350},
            style_multipliers={"budget": Decimal("0.9"), "luxury": Decimal("1.45")},
            style_labels={"budget": "Budget"},
        )


@pytest.mark.parametrize(
    "travellers,expected",
    [
        # 180 × 1e30 + 350 = 180…0350, × 1.15 = 207…0402.5
        (1e30, 207 * 10**30 + 403),
        (1e300, 207 * 10**300 + 403),
    ],
)
def test_very_large_counts_are_priced_exactly(travellers, expected):
    assert estimate(make_request("bali", travellers, 1, "standard")) == expected


def test_largest_finite_counts_do_not_overflow():
    largest = 1.7976931348623157e308
    total = estimate(make_request("paris", largest, largest, "luxury"))
    assert isinstance(total, int)
    assert total > 10**616
