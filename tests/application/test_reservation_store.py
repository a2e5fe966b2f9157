"""Tests for ReservationStore: add, partial update, transitions, removal."""

from datetime import datetime, timezone

import pytest

from storefront.application.reservation_store import ReservationStore
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product, ProductCategory
from storefront.domain.model.reservation import ContactInfo, Reservation, ReservationStatus
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeAdapter

CAR = Product(id="7", name="Model S", price=Money.of("500"), category=ProductCategory.CARS)
WHEN = datetime(2030, 5, 1, 14, 30, tzinfo=timezone.utc)


def _reservation(rid: str = "r-1", status=ReservationStatus.PENDING) -> Reservation:
    return Reservation(
        id=rid,
        product=CAR,
        date=WHEN,
        fee=Money.of(50),
        contact_info=ContactInfo(name="Alice", email="alice@example.com", phone="555-0100"),
        status=status,
    )


def _store(strict: bool = True, initial=None) -> tuple[ReservationStore, FakeAdapter]:
    adapter = FakeAdapter(initial)
    store = ReservationStore(adapter, strict_transitions=strict)
    store.initialize()
    return store, adapter


class TestAddReservation:

    def test_add_appends_in_order(self):
        store, adapter = _store()
        store.add_reservation(_reservation("a"))
        store.add_reservation(_reservation("b"))
        assert [r.id for r in store.reservations] == ["a", "b"]
        assert store.get_reservation_count() == 2
        assert adapter.last_saved == store.reservations

    def test_same_product_can_be_reserved_twice(self):
        store, _ = _store()
        store.add_reservation(_reservation("a"))
        store.add_reservation(_reservation("b"))
        assert {r.product.id for r in store.reservations} == {"7"}
        assert store.get_reservation_count() == 2


class TestUpdateReservation:

    def test_status_update_changes_only_status(self):
        store, _ = _store()
        before = _reservation()
        store.add_reservation(before)

        assert store.update_reservation("r-1", status=ReservationStatus.CONFIRMED)

        after = store.get_reservation("r-1")
        assert after.status == ReservationStatus.CONFIRMED
        assert after.product == before.product
        assert after.date == before.date
        assert after.fee == before.fee
        assert after.contact_info == before.contact_info

    def test_cancel_scenario(self):
        store, _ = _store()
        store.add_reservation(_reservation())

        store.update_reservation("r-1", status="cancelled")

        assert store.get_reservation_count() == 1
        r = store.get_reservation("r-1")
        assert r.status == ReservationStatus.CANCELLED
        assert r.fee == Money.of(50)

    def test_contact_info_is_replaced_whole(self):
        store, _ = _store()
        store.add_reservation(
            Reservation.create(CAR, WHEN, ContactInfo("Alice", "a@x.io", "1", message="hi"))
        )
        rid = store.reservations[0].id

        store.update_reservation(rid, contact_info=ContactInfo("Bob", "b@x.io", "2"))

        assert store.get_reservation(rid).contact_info == ContactInfo("Bob", "b@x.io", "2")
        assert store.get_reservation(rid).contact_info.message is None

    def test_other_records_untouched(self):
        store, _ = _store()
        store.add_reservation(_reservation("a"))
        store.add_reservation(_reservation("b"))
        store.update_reservation("b", fee=Money.of(75))
        assert store.get_reservation("a").fee == Money.of(50)
        assert store.get_reservation("b").fee == Money.of(75)

    def test_id_cannot_be_changed(self):
        store, _ = _store()
        store.add_reservation(_reservation())
        store.update_reservation("r-1", id="hijacked", fee=Money.of(60))
        assert store.get_reservation("hijacked") is None
        assert store.get_reservation("r-1").fee == Money.of(60)

    def test_missing_id_is_a_no_op(self):
        store, adapter = _store()
        store.add_reservation(_reservation())
        assert store.update_reservation("nope", status=ReservationStatus.CONFIRMED) is False
        assert len(adapter.saved) == 1

    def test_unknown_field_rejected(self):
        store, _ = _store()
        store.add_reservation(_reservation())
        with pytest.raises(ValidationError, match="Unknown reservation field"):
            store.update_reservation("r-1", colour="red")

    def test_unknown_status_is_ignored(self):
        store, adapter = _store()
        store.add_reservation(_reservation())

        assert store.update_reservation("r-1", status="teleported", fee=Money.of(1)) is False

        assert store.get_reservation("r-1") == _reservation()
        assert len(adapter.saved) == 1

    def test_unknown_status_on_missing_id_is_a_no_op(self):
        store, _ = _store()
        assert store.update_reservation("missing", status="bogus") is False


class TestTransitions:

    def test_full_happy_path(self):
        store, _ = _store()
        store.add_reservation(_reservation())
        assert store.confirm_payment("r-1")
        assert store.complete_reservation("r-1")
        assert store.get_reservation("r-1").status == ReservationStatus.COMPLETED

    def test_illegal_transition_ignored_when_strict(self):
        store, adapter = _store()
        store.add_reservation(_reservation())

        assert store.complete_reservation("r-1") is False

        assert store.get_reservation("r-1").status == ReservationStatus.PENDING
        assert len(adapter.saved) == 1

    def test_rejected_transition_drops_the_whole_update(self):
        store, _ = _store()
        store.add_reservation(_reservation(status=ReservationStatus.CANCELLED))
        applied = store.update_reservation(
            "r-1", status=ReservationStatus.CONFIRMED, fee=Money.of(999)
        )
        assert applied is False
        assert store.get_reservation("r-1").fee == Money.of(50)

    def test_cancelled_is_terminal(self):
        store, _ = _store()
        store.add_reservation(_reservation())
        store.cancel_reservation("r-1")
        assert store.confirm_payment("r-1") is False
        assert store.get_reservation("r-1").status == ReservationStatus.CANCELLED

    def test_permissive_store_accepts_any_status(self):
        store, _ = _store(strict=False)
        store.add_reservation(_reservation(status=ReservationStatus.CANCELLED))
        assert store.update_reservation("r-1", status=ReservationStatus.PENDING)
        assert store.get_reservation("r-1").status == ReservationStatus.PENDING


class TestRemoval:

    def test_remove(self):
        store, _ = _store()
        store.add_reservation(_reservation("a"))
        store.add_reservation(_reservation("b"))
        store.remove_reservation("a")
        assert [r.id for r in store.reservations] == ["b"]

    def test_remove_missing_is_a_no_op(self):
        store, adapter = _store()
        store.remove_reservation("ghost")
        assert adapter.saved == []

    def test_clear(self):
        store, _ = _store(initial=(_reservation("a"), _reservation("b")))
        assert store.get_reservation_count() == 2
        store.clear_reservations()
        assert store.get_reservation_count() == 0
