"""Application service: Update Contact Info use case."""

from __future__ import annotations

from storefront.application.reservation_store import ReservationStore
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.reservation import ContactInfo


class UpdateContactInfoHandler:

    def __init__(self, reservation_store: ReservationStore) -> None:
        self._reservation_store = reservation_store

    def handle(
        self,
        reservation_id: str,
        name: str,
        email: str,
        phone: str,
        message: str | None = None,
    ) -> None:
        """Replace a reservation's contact details as a whole."""
        if self._reservation_store.get_reservation(reservation_id) is None:
            raise EntityNotFoundError(f"Reservation '{reservation_id}' not found")

        if not (name.strip() and email.strip() and phone.strip()):
            raise ValidationError("Name, email and phone are all required")

        self._reservation_store.update_reservation(
            reservation_id,
            contact_info=ContactInfo(
                name=name.strip(),
                email=email.strip(),
                phone=phone.strip(),
                message=message or None,
            ),
        )
