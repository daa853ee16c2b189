from decimal import Decimal

from hotel_reservation.hotel.domain.enum import ReservationStatus, RoomCategory
from hotel_reservation.hotel.domain.value_object import BookingId, GuestName
from hotel_reservation.shared.domain import Money


class TestReservation:
    def test_cancel_confirmed_reservation(self, create_reservation):
        reservation = create_reservation(status=ReservationStatus.CONFIRMED)
        reservation.cancel()
        assert reservation.status == ReservationStatus.CANCELLED
        assert not reservation.is_confirmed()

    def test_cancel_already_cancelled_reservation(self, create_reservation):
        reservation = create_reservation(status=ReservationStatus.CANCELLED)
        reservation.cancel()
        assert reservation.status == ReservationStatus.CANCELLED

    def test_reservation_properties(self, create_reservation):
        reservation = create_reservation()
        assert reservation.id == BookingId(value="BK1001")
        assert reservation.guest_name == GuestName(value="Juan dela Cruz")
        assert reservation.room_number == 101
        assert reservation.room_category == RoomCategory.STANDARD
        assert reservation.nights() == 2
        assert reservation.total_amount == Money.php(Decimal("5000"))
        assert reservation.is_confirmed()

    def test_equality_is_by_booking_id(self, create_reservation):
        first = create_reservation(booking_id="BK1001", room_number=101)
        second = create_reservation(booking_id="bk1001", room_number=202)
        assert first == second
        assert hash(first) == hash(second)
