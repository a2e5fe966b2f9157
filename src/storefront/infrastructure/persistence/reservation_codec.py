"""Wire mapping for the reservation state.

Payload::

    {"reservations": [{
        "id": "...",
        "product": {<product fields>},
        "date": "2025-06-01T14:30:00.000Z",
        "fee": "4500.00",
        "status": "pending",
        "contactInfo": {"name": ..., "email": ..., "phone": ..., "message": ...}
    }]}

``date`` always goes through the timestamp codec; no other string field
is ever read as a date, however much it looks like one.
"""

from __future__ import annotations

from typing import Any

from storefront.application.reservation_store import ReservationState
from storefront.domain.model.reservation import (
    ContactInfo,
    Reservation,
    ReservationStatus,
)
from storefront.infrastructure.persistence.codec import (
    DecodeError,
    StateCodec,
    decode_money,
    decode_timestamp,
    encode_money,
    encode_timestamp,
    require,
    require_list,
    stringify_amount,
)
from storefront.infrastructure.persistence.product_codec import (
    product_from_raw,
    product_to_raw,
)


class ReservationCodec(StateCodec[ReservationState]):

    def encode(self, state: ReservationState) -> dict[str, Any]:
        return {"reservations": [self._to_raw(r) for r in state]}

    def decode(self, payload: dict[str, Any]) -> ReservationState:
        return tuple(
            self._to_domain(raw) for raw in require_list(payload, "reservations")
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(reservation: Reservation) -> dict[str, Any]:
        contact = reservation.contact_info
        contact_raw: dict[str, Any] = {
            "name": contact.name,
            "email": contact.email,
            "phone": contact.phone,
        }
        if contact.message is not None:
            contact_raw["message"] = contact.message
        return {
            "id": reservation.id,
            "product": product_to_raw(reservation.product),
            "date": encode_timestamp(reservation.date),
            "fee": encode_money(reservation.fee),
            "currency": reservation.fee.currency,
            "status": reservation.status.value,
            "contactInfo": contact_raw,
        }

    @staticmethod
    def _to_domain(raw: Any) -> Reservation:
        if not isinstance(raw, dict):
            raise DecodeError(f"Expected a reservation object, got {type(raw).__name__}")
        try:
            status = ReservationStatus(require(raw, "status", str))
        except ValueError as exc:
            raise DecodeError(f"Unknown reservation status: {raw.get('status')!r}") from exc

        contact_raw = require(raw, "contactInfo", dict)
        message = contact_raw.get("message")
        contact = ContactInfo(
            name=require(contact_raw, "name", str),
            email=require(contact_raw, "email", str),
            phone=require(contact_raw, "phone", str),
            message=message if isinstance(message, str) else None,
        )
        return Reservation(
            id=require(raw, "id", str),
            product=product_from_raw(require(raw, "product", dict)),
            date=decode_timestamp(raw.get("date")),
            fee=decode_money(raw.get("fee"), raw.get("currency", "USD")),
            status=status,
            contact_info=contact,
        )


RESERVATION_STATE_VERSION = 1


def _migrate_v0(payload: dict[str, Any]) -> dict[str, Any]:
    """Version 0 blobs stored fees and product prices as JSON numbers."""
    records = []
    for raw in require_list(payload, "reservations"):
        record = dict(raw)
        stringify_amount(record, "fee")
        if isinstance(record.get("product"), dict):
            record["product"] = dict(record["product"])
            stringify_amount(record["product"], "price")
        records.append(record)
    return {**payload, "reservations": records}


RESERVATION_MIGRATIONS = {0: _migrate_v0}
