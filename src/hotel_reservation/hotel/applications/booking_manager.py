from __future__ import annotations

from datetime import date
from pathlib import Path

from hotel_reservation.hotel.applications.hotel_statistics import HotelStatistics
from hotel_reservation.hotel.domain.entity import Reservation, Room
from hotel_reservation.hotel.domain.enum import PaymentMethod, RoomCategory
from hotel_reservation.hotel.domain.exception import (
    ReservationNotFoundException,
    RoomAlreadyOccupiedException,
)
from hotel_reservation.hotel.domain.factory import (
    ReservationDetails,
    ReservationFactory,
)
from hotel_reservation.hotel.domain.repository import (
    ReservationReportExporter,
    ReservationRepository,
    RoomRegistry,
)
from hotel_reservation.hotel.domain.value_object import BookingId, StayPeriod
from hotel_reservation.shared.utils import get_logger

logger = get_logger()


class BookingManager:
    """Booking and cancellation use cases

    Owns the reservation set and the booking id counter. Every successful
    booking or cancellation is flushed to the repository.
    """

    COUNTER_BASE = 1000

    def __init__(
        self,
        registry: RoomRegistry,
        repository: ReservationRepository,
        factory: ReservationFactory | None = None,
        exporter: ReservationReportExporter | None = None,
    ) -> None:
        self._registry = registry
        self._repository = repository
        self._factory = factory or ReservationFactory()
        self._exporter = exporter
        self._reservations: dict[BookingId, Reservation] = {}
        self._counter = self.COUNTER_BASE

    @property
    def registry(self) -> RoomRegistry:
        return self._registry

    def load(self) -> int:
        """Load persisted reservations and mark their rooms occupied

        Meant to run once at startup, before any booking. A confirmed
        reservation for a room already held by an earlier confirmed one is
        cancelled so a room never carries two active bookings.
        """
        loaded = self._repository.load_all()
        holders: dict[int, BookingId] = {}

        for reservation in loaded:
            if reservation.id in self._reservations:
                logger.warning(
                    "Duplicate booking id in snapshot, keeping the first record",
                    extra={"booking_id": str(reservation.id)},
                )
                continue

            if reservation.total_amount.currency != self._factory.currency:
                logger.warning(
                    "Reservation priced in a foreign currency, left out of revenue",
                    extra={
                        "booking_id": str(reservation.id),
                        "currency": str(reservation.total_amount.currency),
                    },
                )

            if reservation.is_confirmed():
                holder = holders.get(reservation.room_number)
                if holder is not None:
                    logger.warning(
                        "Room already held by a confirmed booking, cancelling duplicate",
                        extra={
                            "booking_id": str(reservation.id),
                            "room_number": reservation.room_number,
                            "held_by": str(holder),
                        },
                    )
                    reservation.cancel()
                else:
                    holders[reservation.room_number] = reservation.id
                    room = self._registry.find(reservation.room_number)
                    if room is not None:
                        room.set_available(False)

            self._reservations[reservation.id] = reservation

        if loaded:
            self._counter = self.COUNTER_BASE + len(loaded)
        logger.info("Reservations loaded", extra={"count": len(self._reservations)})
        return len(self._reservations)

    def search_rooms(self, category: RoomCategory | None = None) -> list[Room]:
        return self._registry.search(category)

    def book(
        self,
        guest_name: str,
        guest_email: str,
        room_number: int,
        check_in: date | str,
        check_out: date | str,
        payment_method: PaymentMethod | str,
    ) -> Reservation:
        """Book a room

        Raises RoomNotFoundException, RoomAlreadyOccupiedException or
        InvalidDateRangeException; nothing is changed when validation fails.
        """
        room = self._registry.get(room_number)
        if not room.available:
            raise RoomAlreadyOccupiedException(room_number)
        stay_period = StayPeriod.parse(check_in, check_out)
        method = PaymentMethod(payment_method)

        sequence, booking_id = self._next_booking_id()
        details: ReservationDetails = {
            "guest_name": guest_name,
            "guest_email": guest_email,
            "check_in_date": stay_period.check_in,
            "check_out_date": stay_period.check_out,
            "payment_method": method,
        }
        reservation = self._factory.create(booking_id, room, details)

        self._counter = sequence
        room.set_available(False)
        self._reservations[reservation.id] = reservation
        self._persist()

        logger.info(
            "Reservation booked",
            extra={
                "booking_id": str(reservation.id),
                "room_number": room_number,
                "nights": reservation.nights(),
                "total_amount": str(reservation.total_amount.amount),
            },
        )
        return reservation

    def cancel(self, booking_id: BookingId | str) -> bool:
        """Cancel a confirmed reservation; False for unknown or cancelled ids"""
        reservation = self.find(booking_id)
        if reservation is None or not reservation.is_confirmed():
            return False

        reservation.cancel()
        room = self._registry.find(reservation.room_number)
        if room is not None:
            room.set_available(True)
        self._persist()

        logger.info(
            "Reservation cancelled",
            extra={
                "booking_id": str(reservation.id),
                "room_number": reservation.room_number,
            },
        )
        return True

    def find(self, booking_id: BookingId | str) -> Reservation | None:
        if not isinstance(booking_id, BookingId):
            try:
                booking_id = BookingId(value=booking_id)
            except ValueError:
                return None
        return self._reservations.get(booking_id)

    def get(self, booking_id: BookingId | str) -> Reservation:
        reservation = self.find(booking_id)
        if reservation is None:
            raise ReservationNotFoundException(booking_id)
        return reservation

    def reservations(self) -> list[Reservation]:
        return list(self._reservations.values())

    def statistics(self) -> HotelStatistics:
        return HotelStatistics.compute(
            self._registry, self._reservations.values(), self._factory.currency
        )

    def export_report(self) -> Path | None:
        if self._exporter is None:
            raise RuntimeError("No report exporter configured")
        return self._exporter.export(self.reservations())

    def _next_booking_id(self) -> tuple[int, BookingId]:
        sequence = self._counter
        while True:
            sequence += 1
            booking_id = BookingId.from_sequence(sequence)
            if booking_id not in self._reservations:
                return sequence, booking_id

    def _persist(self) -> None:
        if not self._repository.save_all(self.reservations()):
            logger.warning("Reservation snapshot not saved, continuing in memory")
