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
from hotel_reservation.shared.domain import AggregateRoot, Money


class Reservation(AggregateRoot[BookingId]):
    """Room reservation

    Everything except the status is fixed at creation time. The total amount
    is computed once by the factory and never recalculated.
    """

    def __init__(
        self,
        id: BookingId,
        guest_name: GuestName,
        guest_email: str,
        room_number: int,
        room_category: RoomCategory,
        stay_period: StayPeriod,
        total_amount: Money,
        payment_method: PaymentMethod,
        status: ReservationStatus = ReservationStatus.CONFIRMED,
    ) -> None:
        super().__init__(id)
        self._guest_name = guest_name
        self._guest_email = guest_email
        self._room_number = room_number
        self._room_category = room_category
        self._stay_period = stay_period
        self._total_amount = total_amount
        self._payment_method = payment_method
        self._status = status

    @property
    def guest_name(self) -> GuestName:
        return self._guest_name

    @property
    def guest_email(self) -> str:
        return self._guest_email

    @property
    def room_number(self) -> int:
        return self._room_number

    @property
    def room_category(self) -> RoomCategory:
        return self._room_category

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @property
    def total_amount(self) -> Money:
        return self._total_amount

    @property
    def payment_method(self) -> PaymentMethod:
        return self._payment_method

    @property
    def status(self) -> ReservationStatus:
        return self._status

    def nights(self) -> int:
        return self._stay_period.nights()

    def is_confirmed(self) -> bool:
        return self._status == ReservationStatus.CONFIRMED

    def cancel(self) -> None:
        """Cancel the reservation"""
        if self._status == ReservationStatus.CANCELLED:
            return
        self._status = ReservationStatus.CANCELLED
