"""Application service: seed a demo reservation into an empty store."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable

from storefront.application.reservation_store import ReservationStore
from storefront.domain.model.product import ProductCategory
from storefront.domain.model.reservation import ContactInfo, Reservation
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

SAMPLE_CONTACT = ContactInfo(
    name="Demo User",
    email="demo@example.com",
    phone="(555) 123-4567",
    message="I'd like to see this vehicle in person.",
)


class AddSampleReservationHandler:

    def __init__(
        self,
        reservation_store: ReservationStore,
        product_repo: ProductRepository,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._reservation_store = reservation_store
        self._product_repo = product_repo
        self._clock = clock

    def handle(self) -> Reservation | None:
        """Reserve the first car in the catalog a week from now.

        Does nothing (returns None) if any reservation already exists or
        the catalog has no cars.
        """
        if self._reservation_store.get_reservation_count() > 0:
            return None

        cars = self._product_repo.list_by_category(ProductCategory.CARS)
        if not cars:
            logger.info("No cars in the catalog, sample reservation skipped")
            return None

        reservation = Reservation.create(
            product=cars[0],
            date=self._clock() + timedelta(days=7),
            contact_info=SAMPLE_CONTACT,
        )
        self._reservation_store.add_reservation(reservation)
        return reservation
