"""Application service: Create Reservation use case.

Resolves the vehicle from the catalog, prices the reservation fee
(a fixed share of the vehicle's price) and records a pending
reservation. A quick reservation skips the contact form and stores
placeholder details the shopper is asked to fill in later.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from storefront.application.reservation_store import ReservationStore
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Product, ProductStatus
from storefront.domain.model.reservation import (
    ContactInfo,
    Reservation,
    normalize_date,
    reservation_fee,
)
from storefront.domain.repository.product_repository import ProductRepository


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CreateReservationHandler:

    def __init__(
        self,
        reservation_store: ReservationStore,
        product_repo: ProductRepository,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._reservation_store = reservation_store
        self._product_repo = product_repo
        self._clock = clock

    def handle(
        self,
        product_id: str,
        date: datetime,
        name: str,
        email: str,
        phone: str,
        message: str | None = None,
    ) -> Reservation:
        """Reserve a vehicle for an appointment on ``date``."""
        for label, value in (("Name", name), ("Email", email), ("Phone", phone)):
            if not value or not value.strip():
                raise ValidationError(f"{label} is required")

        contact = ContactInfo(
            name=name.strip(),
            email=email.strip(),
            phone=phone.strip(),
            message=message.strip() if message and message.strip() else None,
        )
        return self._reserve(product_id, date, contact)

    def quick(self, product_id: str, date: datetime) -> Reservation:
        """Reserve without contact details; they are flagged for update."""
        return self._reserve(product_id, date, ContactInfo.placeholder())

    # --- Internal helpers -----------------------------------------------------

    def _reserve(self, product_id: str, date: datetime, contact: ContactInfo) -> Reservation:
        product = self._reservable_product(product_id)

        appointment = normalize_date(date)
        if appointment.date() < self._clock().astimezone(timezone.utc).date():
            raise ValidationError("Reservation date cannot be in the past")

        reservation = Reservation.create(
            product=product,
            date=appointment,
            contact_info=contact,
            fee=reservation_fee(product),
        )
        self._reservation_store.add_reservation(reservation)
        return reservation

    def _reservable_product(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        if not product.is_vehicle:
            raise ValidationError(
                f"Only vehicles can be reserved; '{product.name}' is in {product.category.value}"
            )
        if product.status == ProductStatus.SOLD:
            raise ValidationError(f"'{product.name}' has already been sold")
        return product
