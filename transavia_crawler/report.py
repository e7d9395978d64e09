from __future__ import annotations

import html
from datetime import datetime
from typing import List

from .models import FlightOffer, SearchRequest

SUBJECT = "Nouvelle offre de vol"

_HEADER = """<h1>Transavia résultat de la recherche</h1>
<p>
  Voici les résultats de la recherche en fonction des paramètres que vous avez entrés:
</p>
<ul>
  <li><strong>Départ:</strong> {origin}</li>
  <li><strong>Arrivée:</strong> {destination}</li>
  <li><strong>Date de départ:</strong> {start}</li>
  <li><strong>Nombre d'adultes:</strong> {adults}</li>
  <li><strong>Nombre d'enfants:</strong> {children}</li>
  <li><strong>Prix maximum:</strong> {max_price}</li>
  <li><strong>Plage horaire:</strong> {hour_start}h - {hour_end}h</li>
</ul>
<table>
  <thead>
    <tr>
      <th>Vol</th>
      <th>Départ</th>
      <th>Arrivée</th>
      <th>Prix/passager</th>
      <th>Passagers</th>
      <th>Prix total</th>
      <th>Lien</th>
    </tr>
  </thead>
  <tbody>
"""

_FOOTER = """  </tbody>
</table>
"""


def format_datetime(value: datetime) -> str:
    """French ``dd/mm/YYYY HH:MM`` rendering used in mails."""
    return value.strftime("%d/%m/%Y %H:%M")


class Report:
    """Plain text and HTML rows collected over one scan."""

    def __init__(self, request: SearchRequest) -> None:
        self.request = request
        self.offers: List[FlightOffer] = []
        self._text: List[str] = []
        self._rows: List[str] = []

    @property
    def has_results(self) -> bool:
        return bool(self.offers)

    def add(self, offer: FlightOffer) -> None:
        req = self.request
        cur = offer.currency
        self.offers.append(offer)
        self._text.append(
            f"Le vol n°{offer.flight_number} départ {format_datetime(offer.departure)} "
            f"depuis {req.origin}, arrivé {format_datetime(offer.arrival)} à {req.destination} "
            f"pour {offer.price_all_passengers}{cur} "
            f"({offer.price_one_passenger}{cur}/passager). {offer.deep_link}\n\n"
        )
        link = html.escape(offer.deep_link)
        self._rows.append(
            "    <tr>"
            f"<td>{html.escape(offer.flight_number)}</td>"
            f"<td>{format_datetime(offer.departure)}</td>"
            f"<td>{format_datetime(offer.arrival)}</td>"
            f"<td>{offer.price_one_passenger} {html.escape(cur)}</td>"
            f"<td>{req.passengers}</td>"
            f"<td>{offer.price_all_passengers} {html.escape(cur)}</td>"
            f'<td><a href="{link}">{link}</a></td>'
            "</tr>\n"
        )

    @property
    def text_body(self) -> str:
        return "".join(self._text)

    @property
    def html_body(self) -> str:
        req = self.request
        header = _HEADER.format(
            origin=html.escape(req.origin),
            destination=html.escape(req.destination),
            start=req.start_date.strftime("%d/%m/%Y"),
            adults=req.adults,
            children=req.children,
            max_price=req.max_price,
            hour_start=req.hour_range[0],
            hour_end=req.hour_range[1],
        )
        return header + "".join(self._rows) + _FOOTER


__all__ = ["Report", "SUBJECT", "format_datetime"]
