"""Data models used throughout the project."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Tuple

DEFAULT_MAX_PRICE = Decimal("1000")
DEFAULT_HOUR_RANGE = (0, 24)


@dataclass(frozen=True, slots=True)
class SearchRequest:
    origin: str
    destination: str
    start_date: date
    recipients: Tuple[str, ...]
    adults: int = 2
    children: int = 0
    max_price: Decimal = DEFAULT_MAX_PRICE
    hour_range: Tuple[int, int] = DEFAULT_HOUR_RANGE

    @property
    def passengers(self) -> int:
        return self.adults + self.children


@dataclass(frozen=True, slots=True)
class FlightOffer:
    flight_number: str
    departure: datetime
    arrival: datetime
    price_one_passenger: Decimal
    price_all_passengers: Decimal
    currency: str
    deep_link: str
