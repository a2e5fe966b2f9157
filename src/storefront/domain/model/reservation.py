"""Reservation record and its status lifecycle.

A reservation holds a vehicle for a scheduled appointment against a
reservation fee. Its status moves through a small state machine:

    pending ──> confirmed ──> completed
       │            │
       └────────────┴──────> cancelled

``completed`` and ``cancelled`` are terminal. Every legal move is listed
in ``_ALLOWED_TRANSITIONS``; nothing else in the codebase decides which
status changes are permitted.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from storefront.domain.exceptions import InvalidTransitionError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money

RESERVATION_FEE_RATE = Decimal("0.10")

QUICK_RESERVATION_NAME = "Quick Reservation"
PLACEHOLDER_PHONE = "Please update"


class ReservationStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    def can_transition_to(self, target: ReservationStatus) -> bool:
        if target is self:
            return True
        return target in _ALLOWED_TRANSITIONS[self]

    @property
    def is_terminal(self) -> bool:
        return not _ALLOWED_TRANSITIONS[self]


_ALLOWED_TRANSITIONS: dict[ReservationStatus, frozenset[ReservationStatus]] = {
    ReservationStatus.PENDING: frozenset(
        {ReservationStatus.CONFIRMED, ReservationStatus.CANCELLED}
    ),
    ReservationStatus.CONFIRMED: frozenset(
        {ReservationStatus.COMPLETED, ReservationStatus.CANCELLED}
    ),
    ReservationStatus.COMPLETED: frozenset(),
    ReservationStatus.CANCELLED: frozenset(),
}


def reservation_fee(product: Product) -> Money:
    """The fee charged to hold ``product``: a fixed share of its price."""
    return product.price.times(RESERVATION_FEE_RATE)


def normalize_date(value: datetime) -> datetime:
    """Make ``value`` timezone-aware UTC with millisecond precision.

    Naive datetimes are taken to already be in UTC.
    """
    if not isinstance(value, datetime):
        raise ValidationError(
            f"Reservation date must be a datetime, got {type(value).__name__}"
        )
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.replace(microsecond=(value.microsecond // 1000) * 1000)


@dataclass(frozen=True)
class ContactInfo:
    name: str
    email: str
    phone: str
    message: str | None = None

    @property
    def needs_update(self) -> bool:
        """True while the placeholder details of a quick reservation remain."""
        return self.name == QUICK_RESERVATION_NAME or self.phone == PLACEHOLDER_PHONE

    @staticmethod
    def placeholder(message: str | None = None) -> ContactInfo:
        return ContactInfo(
            name=QUICK_RESERVATION_NAME,
            email="",
            phone=PLACEHOLDER_PHONE,
            message=message,
        )


@dataclass(frozen=True)
class Reservation:
    """A reservation request for one product.

    Use ``Reservation.create()`` for new reservations: it assigns a fresh
    uuid4 id and starts the record in ``pending``. The plain constructor
    is what the codec uses to reconstitute persisted records.
    """

    id: str
    product: Product
    date: datetime
    fee: Money
    contact_info: ContactInfo
    status: ReservationStatus = ReservationStatus.PENDING

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Reservation id is required")
        # frozen dataclass: normalise in place before anyone can see it
        object.__setattr__(self, "date", normalize_date(self.date))

    @staticmethod
    def create(
        product: Product,
        date: datetime,
        contact_info: ContactInfo,
        fee: Money | None = None,
    ) -> Reservation:
        return Reservation(
            id=str(uuid.uuid4()),
            product=product,
            date=date,
            fee=fee if fee is not None else reservation_fee(product),
            contact_info=contact_info,
        )

    def transition_to(self, status: ReservationStatus) -> Reservation:
        """Return a copy in ``status``, or raise if the move is not allowed."""
        if not self.status.can_transition_to(status):
            raise InvalidTransitionError(
                f"Cannot move reservation {self.id} from "
                f"{self.status.value} to {status.value}"
            )
        return replace(self, status=status)


# Field names a partial update may touch. ``id`` is never one of them.
UPDATABLE_FIELDS = frozenset({"product", "date", "fee", "contact_info", "status"})
