from datetime import date
from typing import TypedDict

from hotel_reservation.hotel.domain.entity import Reservation, Room
from hotel_reservation.hotel.domain.enum import PaymentMethod, ReservationStatus
from hotel_reservation.hotel.domain.value_object import (
    BookingId,
    GuestName,
    StayPeriod,
)
from hotel_reservation.shared.domain import Currency, Money


class ReservationDetails(TypedDict):
    """Input data for a new reservation"""

    guest_name: str
    guest_email: str
    check_in_date: date
    check_out_date: date
    payment_method: PaymentMethod


class ReservationFactory:
    """Factory that creates new reservations"""

    def __init__(self, currency: Currency | None = None) -> None:
        self._currency = currency or Currency.php()

    @property
    def currency(self) -> Currency:
        return self._currency

    def nightly_rate(self, room: Room) -> Money:
        return Money(amount=room.category.nightly_rate, currency=self._currency)

    def create(
        self, booking_id: BookingId, room: Room, details: ReservationDetails
    ) -> Reservation:
        """Create a confirmed reservation and freeze its total amount"""

        guest_name = GuestName(details["guest_name"])
        stay_period = StayPeriod(
            check_in=details["check_in_date"],
            check_out=details["check_out_date"],
        )
        total_amount = self.nightly_rate(room).multiply(stay_period.nights())

        return Reservation(
            id=booking_id,
            guest_name=guest_name,
            guest_email=details["guest_email"].strip(),
            room_number=room.room_number,
            room_category=room.category,
            stay_period=stay_period,
            total_amount=total_amount,
            payment_method=details["payment_method"],
            status=ReservationStatus.CONFIRMED,
        )
