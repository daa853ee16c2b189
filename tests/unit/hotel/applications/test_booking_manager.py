from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from hotel_reservation.hotel.applications import BookingManager
from hotel_reservation.hotel.domain.enum import (
    PaymentMethod,
    ReservationStatus,
    RoomCategory,
)
from hotel_reservation.hotel.domain.exception import (
    InvalidDateRangeException,
    ReservationNotFoundException,
    RoomAlreadyOccupiedException,
    RoomNotFoundException,
)
from hotel_reservation.hotel.domain.value_object import BookingId
from hotel_reservation.shared.domain import Currency


@pytest.fixture
def manager(registry, mock_repository):
    return BookingManager(registry=registry, repository=mock_repository)


def _book(manager, room_number=101, check_in="2025-01-01", check_out="2025-01-03", name="A"):
    return manager.book(
        guest_name=name,
        guest_email="a@example.com",
        room_number=room_number,
        check_in=check_in,
        check_out=check_out,
        payment_method=PaymentMethod.CARD,
    )


class TestBook:
    def test_book_room(self, manager, registry, mock_repository):
        reservation = _book(manager)

        assert reservation.id == BookingId(value="BK1001")
        assert reservation.nights() == 2
        assert reservation.total_amount.amount == Decimal("5000")
        assert reservation.status == ReservationStatus.CONFIRMED
        assert registry.get(101).available is False
        assert manager.find("BK1001") is reservation
        mock_repository.save_all.assert_called_once_with([reservation])

    @pytest.mark.parametrize(
        "room_number, check_out, expected",
        [
            (101, "2025-01-02", Decimal("2500")),
            (202, "2025-01-04", Decimal("14400")),
            (303, "2025-01-08", Decimal("66500")),
        ],
    )
    def test_total_is_nights_times_rate(self, manager, room_number, check_out, expected):
        reservation = _book(manager, room_number=room_number, check_out=check_out)
        assert reservation.total_amount.amount == (
            reservation.room_category.nightly_rate * reservation.nights()
        )
        assert reservation.total_amount.amount == expected

    def test_accepts_date_objects(self, manager):
        reservation = _book(manager, check_in=date(2025, 3, 1), check_out=date(2025, 3, 2))
        assert reservation.nights() == 1

    def test_booking_ids_increment(self, manager):
        first = _book(manager, room_number=101)
        second = _book(manager, room_number=102)
        assert [str(first.id), str(second.id)] == ["BK1001", "BK1002"]

    def test_unknown_room_raises_not_found(self, manager, mock_repository):
        with pytest.raises(RoomNotFoundException, match="Room 999 does not exist"):
            _book(manager, room_number=999)
        assert manager.reservations() == []
        mock_repository.save_all.assert_not_called()

    def test_double_booking_raises_already_occupied(self, manager, mock_repository):
        first = _book(manager)
        with pytest.raises(RoomAlreadyOccupiedException, match="already occupied"):
            _book(manager, name="B")

        assert manager.reservations() == [first]
        assert mock_repository.save_all.call_count == 1

    @pytest.mark.parametrize("check_out", ["2025-01-01", "2024-12-31"])
    def test_invalid_date_range(self, manager, registry, mock_repository, check_out):
        with pytest.raises(InvalidDateRangeException):
            _book(manager, check_out=check_out)

        assert registry.get(101).available is True
        assert manager.reservations() == []
        mock_repository.save_all.assert_not_called()

    def test_failed_booking_does_not_consume_an_id(self, manager):
        with pytest.raises(InvalidDateRangeException):
            _book(manager, check_out="2025-01-01")
        with pytest.raises(ValueError):
            _book(manager, name="   ")

        assert str(_book(manager).id) == "BK1001"

    def test_room_check_precedes_date_check(self, manager):
        _book(manager)
        with pytest.raises(RoomAlreadyOccupiedException):
            _book(manager, check_out="2025-01-01")

    def test_invalid_date_string_raises_value_error(self, manager):
        with pytest.raises(ValueError, match="Invalid date format"):
            _book(manager, check_in="2025/01/01")


class TestCancel:
    def test_cancel_confirmed_reservation(self, manager, registry, mock_repository):
        reservation = _book(manager)

        assert manager.cancel("BK1001") is True

        assert reservation.status == ReservationStatus.CANCELLED
        assert registry.get(101).available is True
        assert mock_repository.save_all.call_count == 2

    def test_cancel_twice_returns_false(self, manager, mock_repository):
        _book(manager)
        assert manager.cancel("BK1001") is True
        assert manager.cancel("BK1001") is False
        assert mock_repository.save_all.call_count == 2

    def test_cancel_unknown_id_returns_false(self, manager, mock_repository):
        assert manager.cancel("BK9999") is False
        assert manager.cancel("") is False
        mock_repository.save_all.assert_not_called()

    def test_cancel_accepts_lower_case_id(self, manager):
        _book(manager)
        assert manager.cancel(" bk1001 ") is True

    def test_room_can_be_booked_again_after_cancel(self, manager):
        _book(manager)
        manager.cancel("BK1001")
        again = _book(manager, name="B")
        assert str(again.id) == "BK1002"

    def test_cancel_skips_room_missing_from_registry(
        self, registry, mock_repository, create_reservation
    ):
        mock_repository.load_all.return_value = [create_reservation(room_number=999)]
        manager = BookingManager(registry=registry, repository=mock_repository)
        manager.load()

        assert manager.cancel("BK1001") is True
        assert manager.find("BK1001").status == ReservationStatus.CANCELLED


class TestFind:
    def test_find_unknown_returns_none(self, manager):
        assert manager.find("BK1001") is None

    def test_get_unknown_raises_not_found(self, manager):
        with pytest.raises(ReservationNotFoundException):
            manager.get("BK1001")

    def test_get_returns_reservation(self, manager):
        reservation = _book(manager)
        assert manager.get(BookingId(value="BK1001")) is reservation


class TestLoad:
    def test_load_marks_confirmed_rooms_occupied(
        self, registry, mock_repository, create_reservation
    ):
        mock_repository.load_all.return_value = [
            create_reservation(booking_id="BK1001", room_number=101),
            create_reservation(
                booking_id="BK1002",
                room_number=102,
                status=ReservationStatus.CANCELLED,
            ),
        ]
        manager = BookingManager(registry=registry, repository=mock_repository)

        assert manager.load() == 2

        assert registry.get(101).available is False
        assert registry.get(102).available is True
        assert [str(r.id) for r in manager.reservations()] == ["BK1001", "BK1002"]

    def test_load_reseeds_counter(self, registry, mock_repository, create_reservation):
        mock_repository.load_all.return_value = [
            create_reservation(booking_id="BK1001", room_number=101),
            create_reservation(booking_id="BK1002", room_number=102),
        ]
        manager = BookingManager(registry=registry, repository=mock_repository)
        manager.load()

        assert str(_book(manager, room_number=201).id) == "BK1003"

    def test_generated_id_skips_existing_ids(
        self, registry, mock_repository, create_reservation
    ):
        mock_repository.load_all.return_value = [
            create_reservation(booking_id="BK1002", room_number=101),
        ]
        manager = BookingManager(registry=registry, repository=mock_repository)
        manager.load()

        assert str(_book(manager, room_number=201).id) == "BK1003"

    def test_duplicate_confirmed_room_is_cancelled(
        self, registry, mock_repository, create_reservation
    ):
        mock_repository.load_all.return_value = [
            create_reservation(booking_id="BK1001", room_number=101),
            create_reservation(booking_id="BK1002", room_number=101),
        ]
        manager = BookingManager(registry=registry, repository=mock_repository)
        manager.load()

        assert manager.find("BK1001").is_confirmed()
        assert manager.find("BK1002").status == ReservationStatus.CANCELLED
        assert registry.get(101).available is False

    def test_duplicate_booking_id_keeps_first(
        self, registry, mock_repository, create_reservation
    ):
        first = create_reservation(booking_id="BK1001", room_number=101)
        mock_repository.load_all.return_value = [
            first,
            create_reservation(booking_id="BK1001", room_number=102),
        ]
        manager = BookingManager(registry=registry, repository=mock_repository)

        assert manager.load() == 1
        assert manager.find("BK1001") is first
        assert registry.get(102).available is True

    def test_foreign_currency_reservation_is_kept_out_of_revenue(
        self, registry, mock_repository, create_reservation
    ):
        mock_repository.load_all.return_value = [
            create_reservation(booking_id="BK1001", room_number=101),
            create_reservation(
                booking_id="BK1002", room_number=102, currency=Currency.usd()
            ),
        ]
        manager = BookingManager(registry=registry, repository=mock_repository)

        assert manager.load() == 2
        assert manager.find("BK1002").is_confirmed()
        assert registry.get(102).available is False

        _book(manager, room_number=201, check_out="2025-01-02")
        stats = manager.statistics()
        assert stats.revenue.amount == Decimal("9800")
        assert stats.revenue.currency == Currency.php()

    def test_load_empty_keeps_base_counter(self, manager):
        assert manager.load() == 0
        assert str(_book(manager).id) == "BK1001"


class TestStatistics:
    def test_revenue_counts_confirmed_only(self, manager):
        _book(manager, room_number=101)
        _book(manager, room_number=201, check_out="2025-01-02")
        manager.cancel("BK1001")

        stats = manager.statistics()

        assert stats.total_rooms == 13
        assert stats.available_rooms == 12
        assert stats.occupied_rooms == 1
        assert stats.total_bookings == 2
        assert stats.confirmed_bookings == 1
        assert stats.cancelled_bookings == 1
        assert stats.revenue.amount == Decimal("4800")

    def test_empty_statistics(self, manager):
        stats = manager.statistics()
        assert stats.total_bookings == 0
        assert stats.revenue.amount == Decimal("0")


class TestSearchAndExport:
    def test_search_rooms_excludes_booked(self, manager):
        _book(manager, room_number=301)
        suites = manager.search_rooms(RoomCategory.SUITE)
        assert [room.room_number for room in suites] == [302, 303]

    def test_export_report_delegates_to_exporter(self, registry, mock_repository):
        exporter = MagicMock()
        manager = BookingManager(
            registry=registry, repository=mock_repository, exporter=exporter
        )
        reservation = _book(manager)

        manager.export_report()

        exporter.export.assert_called_once_with([reservation])

    def test_export_without_exporter_raises_error(self, manager):
        with pytest.raises(RuntimeError):
            manager.export_report()
