from .reservation_repository import ReservationReportExporter, ReservationRepository
from .room_registry import ROOM_CATALOG, RoomRegistry

__all__ = [
    "ROOM_CATALOG",
    "ReservationReportExporter",
    "ReservationRepository",
    "RoomRegistry",
]
