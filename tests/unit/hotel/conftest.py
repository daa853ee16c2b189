from datetime import date
from decimal import Decimal

import pytest

from hotel_reservation.hotel.domain.entity import Reservation
from hotel_reservation.hotel.domain.enum import (
    PaymentMethod,
    ReservationStatus,
    RoomCategory,
)
from hotel_reservation.hotel.domain.value_object import (
    BookingId,
    GuestName,
    StayPeriod,
)
from hotel_reservation.shared.domain import Currency, Money


@pytest.fixture
def create_reservation():
    """Reservation factory fixture (factories as fixtures)"""

    def _factory(
        status: ReservationStatus = ReservationStatus.CONFIRMED,
        booking_id: str = "BK1001",
        guest_name: str = "Juan dela Cruz",
        guest_email: str = "juan@example.com",
        room_number: int = 101,
        room_category: RoomCategory = RoomCategory.STANDARD,
        check_in: date = date(2025, 1, 1),
        check_out: date = date(2025, 1, 3),
        total_amount: Decimal = Decimal("5000"),
        payment_method: PaymentMethod = PaymentMethod.CARD,
        currency: Currency = Currency.php(),
    ) -> Reservation:
        return Reservation(
            id=BookingId(value=booking_id),
            guest_name=GuestName(value=guest_name),
            guest_email=guest_email,
            room_number=room_number,
            room_category=room_category,
            stay_period=StayPeriod(check_in=check_in, check_out=check_out),
            total_amount=Money(amount=total_amount, currency=currency),
            payment_method=payment_method,
            status=status,
        )

    return _factory
