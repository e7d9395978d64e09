from __future__ import annotations

from typing import Tuple

from .models import FlightOffer, SearchRequest

LINK_LOCALE_FROM = "nl-NL"
LINK_LOCALE_TO = "fr-FR"


def parse_hour_range(value: str) -> Tuple[int, int]:
    """Parse an ``"H-H"`` string into inclusive ``(start, end)`` hours.

    Both bounds must lie in ``0..24`` and ``start`` may not exceed ``end``.
    """
    parts = value.strip().split("-")
    if len(parts) != 2:
        raise ValueError(f"expected an hour range like '9-17', got {value!r}")
    try:
        start, end = (int(p.strip()) for p in parts)
    except ValueError:
        raise ValueError(f"hour range bounds must be integers, got {value!r}") from None
    if not (0 <= start <= 24 and 0 <= end <= 24):
        raise ValueError(f"hour range bounds must be within 0-24, got {value!r}")
    if start > end:
        raise ValueError(f"hour range start is after its end: {value!r}")
    return start, end


def departure_hour(offer: FlightOffer) -> int:
    """Return the local departure hour of *offer*.

    Naive timestamps are the departure airport's local time; aware ones keep
    the hour of their own offset.
    """
    return offer.departure.hour


def is_admitted(offer: FlightOffer, request: SearchRequest) -> bool:
    """Return ``True`` if *offer* passes the price and hour filters."""
    if offer.price_one_passenger >= request.max_price:
        return False
    start, end = request.hour_range
    return start <= departure_hour(offer) <= end


def rewrite_locale(link: str) -> str:
    return link.replace(LINK_LOCALE_FROM, LINK_LOCALE_TO)


__all__ = [
    "parse_hour_range",
    "departure_hour",
    "is_admitted",
    "rewrite_locale",
]
