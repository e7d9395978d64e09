from __future__ import annotations

import datetime as dt
import logging
from decimal import Decimal, InvalidOperation

import requests

from .config import DEFAULT_API_URL
from .dates import format_api_date
from .models import FlightOffer
from .offer_filter import rewrite_locale

logger = logging.getLogger(__name__)


class TransaviaFetcherError(RuntimeError):
    """Error talking to the Transavia flight offers API."""

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class TransaviaFetcher:
    """
    Client for the Transavia ``flightoffers`` endpoint (v1).
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_API_URL,
        *,
        timeout: float = 15,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    # ──────────────────────────────────────────────────────────

    def search_offers(
        self,
        origin: str,
        destination: str,
        departure_date: dt.date,
        *,
        adults: int = 2,
        children: int = 0,
        direct_flight: bool = True,
    ) -> list[FlightOffer]:
        """Return the offers for one route on one departure day."""

        params = {
            "origin": origin,
            "destination": destination,
            "originDepartureDate": format_api_date(departure_date),
            "directFlight": "true" if direct_flight else "false",
            "adults": adults,
            "children": children,
        }

        try:
            resp = requests.get(
                self.base_url,
                params=params,
                headers={"apikey": self.api_key},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransaviaFetcherError(f"Request failed – {exc}") from exc

        if not 200 <= resp.status_code < 300:
            raise TransaviaFetcherError(
                f"HTTP {resp.status_code} – {resp.text[:120]}",
                status_code=resp.status_code,
                body=resp.text,
            )
        if resp.status_code == 204 or not resp.content:
            return []

        try:
            data = resp.json()
        except ValueError as exc:
            raise TransaviaFetcherError(
                f"Invalid JSON – {resp.text[:120]}",
                status_code=resp.status_code,
                body=resp.text,
            ) from exc
        if not isinstance(data, dict):
            raise TransaviaFetcherError(
                f"Unexpected payload – {resp.text[:120]}",
                status_code=resp.status_code,
                body=resp.text,
            )

        offers = [self._to_offer(item) for item in data.get("flightOffer") or []]
        return [off for off in offers if off]

    def _to_offer(self, item: dict) -> FlightOffer | None:
        """Map one ``flightOffer`` JSON element onto a FlightOffer."""
        try:
            outbound = item["outboundFlight"]
            pricing = item["pricingInfoSum"]
            href = item["deeplink"]["href"]
            if not isinstance(href, str) or not href:
                raise ValueError("deeplink.href is not a string")
            offer = FlightOffer(
                flight_number=str(outbound["flightNumber"]),
                departure=dt.datetime.fromisoformat(outbound["departureDateTime"]),
                arrival=dt.datetime.fromisoformat(outbound["arrivalDateTime"]),
                price_one_passenger=Decimal(str(pricing["totalPriceOnePassenger"])),
                price_all_passengers=Decimal(str(pricing["totalPriceAllPassengers"])),
                currency=str(pricing.get("currencyCode") or ""),
                deep_link=rewrite_locale(href),
            )
            if not (
                offer.price_one_passenger.is_finite()
                and offer.price_all_passengers.is_finite()
            ):
                raise ValueError("price is not a finite number")
            return offer
        except (AttributeError, KeyError, TypeError, ValueError, InvalidOperation) as exc:
            logger.warning("Skipping malformed offer %r: %s", item, exc)
            return None


__all__ = ["TransaviaFetcher", "TransaviaFetcherError"]
