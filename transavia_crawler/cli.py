from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Optional, Tuple

import click
from pydantic import ValidationError

from .config import Settings, get_settings
from .crawler import crawl as crawl_and_mail
from .crawler import fetcher_from_settings, run_search
from .dates import parse_start_date
from .mailer import MailerError
from .models import DEFAULT_MAX_PRICE, SearchRequest
from .offer_filter import parse_hour_range

logger = logging.getLogger(__name__)

REQUIRED_ARGS = ("origin", "destination", "start", "email")
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(settings: Settings, verbose: bool = False) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        handlers=handlers,
        format=LOG_FORMAT,
    )


def _start_callback(ctx, param, value):
    if value is None:
        return None
    try:
        return parse_start_date(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from None


def _hours_callback(ctx, param, value):
    try:
        return parse_hour_range(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from None


def _price_callback(ctx, param, value):
    try:
        price = Decimal(str(value))
    except InvalidOperation:
        raise click.BadParameter(f"not a number: {value!r}") from None
    if not price.is_finite() or price <= 0:
        raise click.BadParameter("maximum price must be greater than 0")
    return price


@click.group()
@click.version_option("0.0.1")
@click.option("-v", "--verbose", is_flag=True, help="Log debug messages")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Transavia flight offers crawler."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command()
@click.option("-o", "--origin", help="Origin airport code")
@click.option("-d", "--destination", help="Destination airport code")
@click.option("-s", "--start", callback=_start_callback, help="Start date (YYYYMMDD)")
@click.option(
    "-p", "--price", default=str(DEFAULT_MAX_PRICE), callback=_price_callback,
    show_default=True, help="Maximum price per passenger",
)
@click.option("-e", "--email", multiple=True, help="Recipient email address (repeatable)")
@click.option("-a", "--adults", type=click.IntRange(min=0), default=2, show_default=True,
              help="Number of adults")
@click.option("-c", "--children", type=click.IntRange(min=0), default=0, show_default=True,
              help="Number of children")
@click.option("-h", "--hours", default="0-24", callback=_hours_callback, show_default=True,
              help="Departure hour range, inclusive (H-H)")
@click.option("--dry-run", is_flag=True, help="Print matching offers instead of mailing them")
@click.pass_context
def crawl(
    ctx: click.Context,
    origin: Optional[str],
    destination: Optional[str],
    start,
    price: Decimal,
    email: Tuple[str, ...],
    adults: int,
    children: int,
    hours: Tuple[int, int],
    dry_run: bool,
) -> None:
    """Search 15 days of direct flights and mail the matching offers."""
    if not origin or not destination or not start or not email:
        click.echo(ctx.get_help())
        click.echo(
            "Missing required arguments. Required arguments are: "
            + ", ".join(REQUIRED_ARGS),
            err=True,
        )
        ctx.exit(1)

    try:
        settings = get_settings()
    except ValidationError as exc:
        click.echo(f"Invalid configuration: {exc}", err=True)
        ctx.exit(1)

    setup_logging(settings, verbose=(ctx.obj or {}).get("verbose", False))

    request = SearchRequest(
        origin=origin.upper(),
        destination=destination.upper(),
        start_date=start,
        recipients=email,
        adults=adults,
        children=children,
        max_price=price,
        hour_range=hours,
    )

    if dry_run:
        report = run_search(request, fetcher_from_settings(settings))
        click.echo(report.text_body if report.has_results else "No offers found")
        return

    try:
        crawl_and_mail(request, settings)
    except MailerError:
        logger.exception("Sending the report failed")
        ctx.exit(3)


if __name__ == "__main__":
    cli()
