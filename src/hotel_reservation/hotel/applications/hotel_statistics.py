from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from hotel_reservation.hotel.domain.entity import Reservation, Room
from hotel_reservation.shared.domain import Currency, Money


@dataclass(frozen=True)
class HotelStatistics:
    """Occupancy and revenue figures over the current state"""

    total_rooms: int
    available_rooms: int
    total_bookings: int
    confirmed_bookings: int
    revenue: Money

    @property
    def occupied_rooms(self) -> int:
        return self.total_rooms - self.available_rooms

    @property
    def cancelled_bookings(self) -> int:
        return self.total_bookings - self.confirmed_bookings

    @classmethod
    def compute(
        cls,
        rooms: Iterable[Room],
        reservations: Iterable[Reservation],
        currency: Currency,
    ) -> HotelStatistics:
        """Revenue sums confirmed reservations priced in the given currency"""
        rooms = list(rooms)
        reservations = list(reservations)
        confirmed = [r for r in reservations if r.is_confirmed()]

        revenue = Money.zero(currency)
        for reservation in confirmed:
            if reservation.total_amount.currency == currency:
                revenue = revenue.add(reservation.total_amount)

        return cls(
            total_rooms=len(rooms),
            available_rooms=sum(1 for room in rooms if room.available),
            total_bookings=len(reservations),
            confirmed_bookings=len(confirmed),
            revenue=revenue,
        )
