"""Application service: List Reservations use case (query)."""

from __future__ import annotations

from storefront.application.dto import ReservationDTO
from storefront.application.reservation_store import ReservationStore
from storefront.domain.model.reservation import Reservation


class ShowReservationsHandler:

    def __init__(self, reservation_store: ReservationStore) -> None:
        self._reservation_store = reservation_store

    def handle(self) -> list[ReservationDTO]:
        return [self._to_dto(r) for r in self._reservation_store.reservations]

    @staticmethod
    def _to_dto(reservation: Reservation) -> ReservationDTO:
        contact = reservation.contact_info
        return ReservationDTO(
            id=reservation.id,
            product_name=reservation.product.name,
            date=reservation.date.strftime("%Y-%m-%d %H:%M UTC"),
            fee=str(reservation.fee),
            status=reservation.status.value,
            contact_name=contact.name,
            contact_email=contact.email,
            contact_phone=contact.phone,
            needs_contact_update=contact.needs_update,
        )
