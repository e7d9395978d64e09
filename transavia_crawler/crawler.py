from __future__ import annotations

import logging
from typing import Optional, Sequence

from .config import Settings
from .dates import SCAN_DAYS, scan_dates
from .mailer import Mailer
from .models import SearchRequest
from .offer_filter import is_admitted
from .report import SUBJECT, Report
from .transavia_fetcher import TransaviaFetcher, TransaviaFetcherError

logger = logging.getLogger(__name__)


def run_search(
    request: SearchRequest, fetcher: TransaviaFetcher, days: int = SCAN_DAYS
) -> Report:
    """Scan *days* departure dates and collect the admitted offers."""
    report = Report(request)

    for day in scan_dates(request.start_date, days):
        logger.info(
            "Fetching: %s ➔ %s on %s", request.origin, request.destination, day
        )
        try:
            offers = fetcher.search_offers(
                request.origin,
                request.destination,
                day,
                adults=request.adults,
                children=request.children,
            )
        except TransaviaFetcherError as exc:
            logger.warning("  Failed to fetch %s: %s", day, exc.body or exc)
            continue

        for off in offers:
            if not is_admitted(off, request):
                logger.debug("  Rejected %s at %s", off.flight_number, off.departure)
                continue
            report.add(off)

    logger.info("Found %d matching offers", len(report.offers))
    return report


def fetcher_from_settings(settings: Settings) -> TransaviaFetcher:
    return TransaviaFetcher(
        settings.transavia_api_key,
        settings.transavia_api_url,
        timeout=settings.request_timeout_s,
    )


def mailer_from_settings(settings: Settings, receivers: Sequence[str]) -> Mailer:
    return Mailer(
        settings.mail_from,
        receivers,
        host=settings.mail_host,
        user=settings.mail_user,
        password=settings.mail_pass,
        port=settings.mail_port,
    )


def crawl(
    request: SearchRequest,
    settings: Settings,
    *,
    fetcher: Optional[TransaviaFetcher] = None,
    mailer: Optional[Mailer] = None,
) -> Report:
    """Run the scan and mail the report once if anything matched.

    ``MailerError`` propagates to the caller.
    """
    fetcher = fetcher or fetcher_from_settings(settings)
    report = run_search(request, fetcher)

    if not report.has_results:
        logger.info("No matching offers, no mail sent")
        return report

    mailer = mailer or mailer_from_settings(settings, request.recipients)
    mailer.send_mail(SUBJECT, report.text_body, report.html_body)
    logger.info("Report mailed to %s", ", ".join(request.recipients))
    return report


__all__ = ["run_search", "crawl", "fetcher_from_settings", "mailer_from_settings"]
