"""ReservationStore — vehicle reservation requests and their status.

Records are kept in insertion order. Nothing is deduplicated: the same
shopper may reserve the same vehicle again after cancelling.

Status changes go through ``Reservation.transition_to`` when the store is
strict (the default). An illegal move is logged and the whole update is
dropped; the store never raises for it. A non-strict store accepts any
status a caller sets.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from storefront.application.store import Store
from storefront.domain.exceptions import InvalidTransitionError, ValidationError
from storefront.domain.model.reservation import (
    UPDATABLE_FIELDS,
    Reservation,
    ReservationStatus,
)
from storefront.domain.repository.persistence_adapter import PersistenceAdapter

logger = logging.getLogger(__name__)

ReservationState = tuple[Reservation, ...]

RESERVATION_STORAGE_KEY = "shop-reservations"


class ReservationStore(Store[ReservationState]):

    def __init__(
        self,
        adapter: PersistenceAdapter[ReservationState],
        strict_transitions: bool = True,
    ) -> None:
        super().__init__(adapter, empty=())
        self._strict_transitions = strict_transitions

    # --- Queries --------------------------------------------------------------

    @property
    def reservations(self) -> ReservationState:
        return self.state

    def get_reservation(self, reservation_id: str) -> Reservation | None:
        for reservation in self.state:
            if reservation.id == reservation_id:
                return reservation
        return None

    def get_reservation_count(self) -> int:
        return len(self.state)

    # --- Mutations ------------------------------------------------------------

    def add_reservation(self, reservation: Reservation) -> None:
        self._commit(self.state + (reservation,))
        logger.debug(
            f"Added reservation {reservation.id} for product {reservation.product.id}"
        )

    def update_reservation(self, reservation_id: str, **changes: Any) -> bool:
        """Replace the given fields of one reservation.

        ``contact_info`` is swapped as a whole, never merged field by field.
        An ``id`` in ``changes`` is ignored. Returns False when nothing was
        applied (unknown id, unknown status or a rejected status change).
        """
        if "id" in changes:
            logger.warning(f"Ignoring attempt to change id of reservation {reservation_id}")
            changes.pop("id")
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(
                f"Unknown reservation field(s): {', '.join(sorted(unknown))}"
            )

        current = self.get_reservation(reservation_id)
        if current is None:
            logger.warning(f"Reservation {reservation_id} not found, nothing to update")
            return False

        if "status" in changes:
            status = _coerce_status(changes["status"])
            if status is None:
                logger.warning(
                    f"Unknown status {changes['status']!r} for reservation "
                    f"{reservation_id}, update ignored"
                )
                return False
            changes["status"] = status

        try:
            updated = self._apply(current, changes)
        except InvalidTransitionError as exc:
            logger.warning(f"Rejected reservation update: {exc}")
            return False

        self._commit(
            tuple(updated if r.id == reservation_id else r for r in self.state)
        )
        logger.debug(f"Updated reservation {reservation_id}: {', '.join(sorted(changes))}")
        return True

    def confirm_payment(self, reservation_id: str) -> bool:
        """The reservation fee has been paid."""
        return self.update_reservation(reservation_id, status=ReservationStatus.CONFIRMED)

    def cancel_reservation(self, reservation_id: str) -> bool:
        return self.update_reservation(reservation_id, status=ReservationStatus.CANCELLED)

    def complete_reservation(self, reservation_id: str) -> bool:
        """The appointment or sale has concluded."""
        return self.update_reservation(reservation_id, status=ReservationStatus.COMPLETED)

    def remove_reservation(self, reservation_id: str) -> None:
        if self.get_reservation(reservation_id) is None:
            logger.warning(f"Reservation {reservation_id} not found, nothing to remove")
            return
        self._commit(tuple(r for r in self.state if r.id != reservation_id))
        logger.debug(f"Removed reservation {reservation_id}")

    def clear_reservations(self) -> None:
        self._commit(())
        logger.debug("Cleared reservations")

    # --- Internal helpers -----------------------------------------------------

    def _apply(self, current: Reservation, changes: dict[str, Any]) -> Reservation:
        fields = dict(changes)
        status = fields.pop("status", None)
        updated = replace(current, **fields) if fields else current
        if status is None:
            return updated
        if self._strict_transitions:
            return updated.transition_to(status)
        return replace(updated, status=status)


def _coerce_status(value: ReservationStatus | str) -> ReservationStatus | None:
    if isinstance(value, ReservationStatus):
        return value
    try:
        return ReservationStatus(value)
    except (ValueError, TypeError):
        return None
