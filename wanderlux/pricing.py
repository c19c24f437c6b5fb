"""Trip cost pricing model.

Cost model:
    (daily rate per traveller × travellers × days) + base trip fee,
    then multiplied by the travel style multiplier and rounded half-up
    to a whole currency unit.
"""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, localcontext
from types import MappingProxyType
from typing import TYPE_CHECKING, Literal, Mapping, Union

if TYPE_CHECKING:
    from wanderlux.forms.schemas import TripRequest

Destination = Literal["bali", "tokyo", "paris", "sydney"]
TravelStyle = Literal["budget", "standard", "luxury"]

Number = Union[int, float, Decimal]

# Enough digits to hold rate × travellers × days exactly for any finite float count
_PRECISION = 1000


@dataclass(frozen=True)
class PricingTable:
    """Read-only reference data for the trip cost calculator."""

    daily_rates: Mapping[str, int]
    trip_fees: Mapping[str, int]
    style_multipliers: Mapping[str, Decimal]
    style_labels: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        missing_fees = set(self.daily_rates) ^ set(self.trip_fees)
        if missing_fees:
            raise ValueError(
                f"Every destination needs a daily rate and a trip fee: {sorted(missing_fees)}"
            )
        missing_labels = set(self.style_multipliers) - set(self.style_labels)
        if missing_labels:
            raise ValueError(f"Travel styles without a label: {sorted(missing_labels)}")

        # Freeze the mappings so the table can be shared process-wide
        for name in ("daily_rates", "trip_fees", "style_multipliers", "style_labels"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    @property
    def destinations(self) -> tuple:
        return tuple(self.daily_rates)

    @property
    def styles(self) -> tuple:
        return tuple(self.style_multipliers)


PRICING_TABLE = PricingTable(
    # Base daily rate per traveller
    daily_rates={
        "bali": 180,
        "tokyo": 320,
        "paris": 360,
        "sydney": 220,
    },
    # Fixed per-trip accommodation/fees
    trip_fees={
        "bali": 350,
        "tokyo": 600,
        "paris": 650,
        "sydney": 400,
    },
    style_multipliers={
        "budget": Decimal("0.9"),
        "standard": Decimal("1.15"),
        "luxury": Decimal("1.45"),
    },
    style_labels={
        "budget": "Budget",
        "standard": "Standard",
        "luxury": "Luxury",
    },
)


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps 2.5 as 2.5 instead of its binary expansion
    return Decimal(str(value))


def subtotal(
    destination: str,
    traveller_count: Number,
    day_count: Number,
    table: PricingTable = PRICING_TABLE,
) -> Decimal:
    """Cost before the travel style multiplier is applied.

    Args:
        destination: Known destination key.
        traveller_count: Number of travellers (>= 1).
        day_count: Number of days (>= 1).
        table: Pricing table to read rates from.

    Returns:
        Decimal: daily rate × travellers × days + trip fee.

    Raises:
        KeyError: If the destination is not in the table.
    """
    daily_rate = table.daily_rates[destination]
    fixed_fee = table.trip_fees[destination]
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return (
            Decimal(daily_rate) * _to_decimal(traveller_count) * _to_decimal(day_count)
            + Decimal(fixed_fee)
        )


def estimate(request: "TripRequest", table: PricingTable = PRICING_TABLE) -> int:
    """Estimate the total trip cost in whole currency units.

    The multiplied subtotal is rounded half-up (2472.5 -> 2473) using exact
    decimal arithmetic, so the result never depends on float representation.

    Args:
        request: A validated TripRequest (anything with destination,
            traveller_count, day_count and style attributes).
        table: Pricing table to read rates and multipliers from.

    Returns:
        int: Non-negative rounded total.

    Raises:
        KeyError: If destination or style is unknown. Callers validate first.
    """
    multiplier = table.style_multipliers[request.style]
    base = subtotal(request.destination, request.traveller_count, request.day_count, table)
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        total = (base * multiplier).to_integral_value(rounding=ROUND_HALF_UP)
    return int(total)
