"""CLI commands for vehicle reservations."""

from __future__ import annotations

from datetime import datetime

import click

from storefront.application.add_sample_reservation import AddSampleReservationHandler
from storefront.application.create_reservation import CreateReservationHandler
from storefront.application.show_reservations import ShowReservationsHandler
from storefront.application.update_contact_info import UpdateContactInfoHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.reservation import ReservationStatus
from storefront.infrastructure.bootstrap import product_repository, reservation_store
from storefront.infrastructure.config import Settings

_DATE = click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%d %H:%M", "%Y-%m-%dT%H:%M"])


@click.command("create")
@click.option("--product-id", required=True, help="Vehicle to reserve.")
@click.option("--date", "date", required=True, type=_DATE, help="Appointment date (UTC).")
@click.option("--name", required=True, help="Contact name.")
@click.option("--email", required=True, help="Contact email.")
@click.option("--phone", required=True, help="Contact phone.")
@click.option("--message", default=None, help="Optional note for the dealer.")
@click.pass_obj
def reservation_create(
    config: Settings,
    product_id: str,
    date: datetime,
    name: str,
    email: str,
    phone: str,
    message: str | None,
) -> None:
    """Reserve a vehicle for an appointment."""
    handler = CreateReservationHandler(
        reservation_store=reservation_store(config),
        product_repo=product_repository(config),
    )

    try:
        reservation = handler.handle(product_id, date, name, email, phone, message)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Reservation {reservation.id} created (status={reservation.status.value})")
    click.echo(f"Reservation fee: {reservation.fee}")


@click.command("quick")
@click.option("--product-id", required=True, help="Vehicle to reserve.")
@click.option("--date", "date", required=True, type=_DATE, help="Appointment date (UTC).")
@click.pass_obj
def reservation_quick(config: Settings, product_id: str, date: datetime) -> None:
    """Reserve a vehicle now and fill in contact details later."""
    handler = CreateReservationHandler(
        reservation_store=reservation_store(config),
        product_repo=product_repository(config),
    )

    try:
        reservation = handler.quick(product_id, date)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Reservation {reservation.id} created; please update contact details.")


@click.command("sample")
@click.pass_obj
def reservation_sample(config: Settings) -> None:
    """Add a demo reservation if there are none yet."""
    handler = AddSampleReservationHandler(
        reservation_store=reservation_store(config),
        product_repo=product_repository(config),
    )
    reservation = handler.handle()
    if reservation is None:
        click.echo("No sample added.")
    else:
        click.echo(f"Sample reservation {reservation.id} added for {reservation.product.name}")


@click.command("list")
@click.pass_obj
def reservation_list(config: Settings) -> None:
    """List all reservations."""
    rows = ShowReservationsHandler(reservation_store(config)).handle()

    if not rows:
        click.echo("No reservations found.")
        return

    click.echo(f"{'ID':<36}  {'Vehicle':<24} {'Date':<20} {'Fee':>12}  {'Status':<10}")
    click.echo("-" * 108)
    for row in rows:
        flag = "  (update details)" if row.needs_contact_update else ""
        click.echo(
            f"{row.id:<36}  {row.product_name:<24} {row.date:<20} {row.fee:>12}  "
            f"{row.status:<10}{flag}"
        )


def _transition(config: Settings, reservation_id: str, status: ReservationStatus) -> None:
    store = reservation_store(config)
    current = store.get_reservation(reservation_id)
    if current is None:
        raise click.ClickException(f"Reservation '{reservation_id}' not found")
    if not store.update_reservation(reservation_id, status=status):
        raise click.ClickException(
            f"Cannot move reservation from {current.status.value} to {status.value}"
        )


@click.command("pay")
@click.option("--id", "reservation_id", required=True, help="Reservation ID.")
@click.pass_obj
def reservation_pay(config: Settings, reservation_id: str) -> None:
    """Record the reservation fee payment (confirms the reservation)."""
    _transition(config, reservation_id, ReservationStatus.CONFIRMED)
    click.echo(f"Reservation {reservation_id} confirmed, fee paid.")


@click.command("cancel")
@click.option("--id", "reservation_id", required=True, help="Reservation ID.")
@click.pass_obj
def reservation_cancel(config: Settings, reservation_id: str) -> None:
    """Cancel a reservation."""
    _transition(config, reservation_id, ReservationStatus.CANCELLED)
    click.echo(f"Reservation {reservation_id} cancelled.")


@click.command("complete")
@click.option("--id", "reservation_id", required=True, help="Reservation ID.")
@click.pass_obj
def reservation_complete(config: Settings, reservation_id: str) -> None:
    """Mark a confirmed reservation's appointment as concluded."""
    _transition(config, reservation_id, ReservationStatus.COMPLETED)
    click.echo(f"Reservation {reservation_id} completed.")


@click.command("update-contact")
@click.option("--id", "reservation_id", required=True, help="Reservation ID.")
@click.option("--name", required=True, help="Contact name.")
@click.option("--email", required=True, help="Contact email.")
@click.option("--phone", required=True, help="Contact phone.")
@click.option("--message", default=None, help="Optional note for the dealer.")
@click.pass_obj
def reservation_update_contact(
    config: Settings,
    reservation_id: str,
    name: str,
    email: str,
    phone: str,
    message: str | None,
) -> None:
    """Replace a reservation's contact details."""
    handler = UpdateContactInfoHandler(reservation_store(config))

    try:
        handler.handle(reservation_id, name, email, phone, message)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Contact details of reservation {reservation_id} updated.")


@click.command("remove")
@click.option("--id", "reservation_id", required=True, help="Reservation ID.")
@click.pass_obj
def reservation_remove(config: Settings, reservation_id: str) -> None:
    """Delete a reservation record."""
    reservation_store(config).remove_reservation(reservation_id)
    click.echo(f"Reservation {reservation_id} removed.")


@click.command("clear")
@click.pass_obj
def reservation_clear(config: Settings) -> None:
    """Delete every reservation."""
    reservation_store(config).clear_reservations()
    click.echo("Reservations cleared.")
