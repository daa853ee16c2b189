from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from hotel_reservation.hotel.domain.entity import Reservation
from hotel_reservation.shared.domain import SnapshotRepository


class ReservationRepository(SnapshotRepository[Reservation]):
    """Interface of the reservation snapshot store"""

    @abstractmethod
    def load_all(self) -> list[Reservation]:
        """Load every reservation; an unreadable store yields an empty list"""
        raise NotImplementedError

    @abstractmethod
    def save_all(self, reservations: Sequence[Reservation]) -> bool:
        """Overwrite the store; returns False when the write failed"""
        raise NotImplementedError


class ReservationReportExporter(ABC):
    """Interface of the human-readable report writer"""

    @abstractmethod
    def export(self, reservations: Sequence[Reservation]) -> Path | None:
        """Write the report; returns its location, or None when writing failed"""
        raise NotImplementedError
