from __future__ import annotations

from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Sequence

from pydantic import BaseModel, ValidationError, field_validator

from hotel_reservation.hotel.domain.entity import Reservation
from hotel_reservation.hotel.domain.enum import (
    PaymentMethod,
    ReservationStatus,
    RoomCategory,
)
from hotel_reservation.hotel.domain.repository import ReservationRepository
from hotel_reservation.hotel.domain.value_object import (
    BookingId,
    GuestName,
    StayPeriod,
)
from hotel_reservation.shared.domain import Currency, DomainException, Money
from hotel_reservation.shared.utils import get_logger

logger = get_logger()

SNAPSHOT_VERSION = 1


class ReservationRecord(BaseModel):
    """One reservation as stored in the snapshot file"""

    booking_id: str
    guest_name: str
    guest_email: str
    room_number: int
    room_category: str
    check_in_date: date
    check_out_date: date
    total_amount: Decimal
    currency: str
    payment_method: PaymentMethod
    status: ReservationStatus

    @field_validator("room_category")
    @classmethod
    def validate_room_category(cls, v: str) -> str:
        if v not in RoomCategory.__members__:
            raise ValueError(f"Unknown room category: {v}")
        return v

    @classmethod
    def from_entity(cls, reservation: Reservation) -> ReservationRecord:
        return cls(
            booking_id=str(reservation.id),
            guest_name=str(reservation.guest_name),
            guest_email=reservation.guest_email,
            room_number=reservation.room_number,
            room_category=reservation.room_category.name,
            check_in_date=reservation.stay_period.check_in,
            check_out_date=reservation.stay_period.check_out,
            total_amount=reservation.total_amount.amount,
            currency=str(reservation.total_amount.currency),
            payment_method=reservation.payment_method,
            status=reservation.status,
        )

    def to_entity(self) -> Reservation:
        return Reservation(
            id=BookingId(value=self.booking_id),
            guest_name=GuestName(value=self.guest_name),
            guest_email=self.guest_email,
            room_number=self.room_number,
            room_category=RoomCategory[self.room_category],
            stay_period=StayPeriod(
                check_in=self.check_in_date,
                check_out=self.check_out_date,
            ),
            total_amount=Money(
                amount=self.total_amount,
                currency=Currency(self.currency),
            ),
            payment_method=self.payment_method,
            status=self.status,
        )


class ReservationSnapshot(BaseModel):
    """Root document of the snapshot file"""

    version: int = SNAPSHOT_VERSION
    reservations: list[ReservationRecord]


class JsonFileReservationRepository(ReservationRepository):
    """ReservationRepository backed by a JSON file"""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load_all(self) -> list[Reservation]:
        """Read the snapshot; any read error degrades to an empty list

        A snapshot that cannot be parsed is moved to ``<name>.corrupt`` so the
        next save does not overwrite the only copy of its records.
        """
        if not self.path.exists():
            logger.info("No reservation snapshot found", extra={"path": str(self.path)})
            return []

        try:
            data = self.path.read_bytes()
        except OSError:
            logger.exception(
                "Could not read saved reservations", extra={"path": str(self.path)}
            )
            return []

        try:
            snapshot = ReservationSnapshot.model_validate_json(data)
            reservations = [record.to_entity() for record in snapshot.reservations]
        except (ValidationError, ValueError, DomainException):
            logger.exception(
                "Could not load saved reservations", extra={"path": str(self.path)}
            )
            self._quarantine()
            return []

        logger.info(
            "Loaded reservations",
            extra={"path": str(self.path), "count": len(reservations)},
        )
        return reservations

    @property
    def corrupt_path(self) -> Path:
        return self.path.with_name(self.path.name + ".corrupt")

    def _quarantine(self) -> None:
        try:
            self.path.replace(self.corrupt_path)
        except OSError:
            logger.exception(
                "Could not move unreadable snapshot aside",
                extra={"path": str(self.path)},
            )
            return
        logger.warning(
            "Unreadable snapshot moved aside",
            extra={"path": str(self.path), "moved_to": str(self.corrupt_path)},
        )

    def save_all(self, reservations: Sequence[Reservation]) -> bool:
        """Replace the snapshot with the given reservations"""
        snapshot = ReservationSnapshot(
            reservations=[ReservationRecord.from_entity(r) for r in reservations]
        )
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError:
            logger.exception(
                "Could not save reservations", extra={"path": str(self.path)}
            )
            return False
        return True
