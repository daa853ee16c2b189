from .entity import Reservation, Room
from .enum import PaymentMethod, ReservationStatus, RoomCategory
from .exception import (
    InvalidDateRangeException,
    ReservationNotFoundException,
    RoomAlreadyOccupiedException,
    RoomNotFoundException,
)
from .factory import ReservationDetails, ReservationFactory
from .repository import (
    ReservationReportExporter,
    ReservationRepository,
    RoomRegistry,
)
from .value_object import BookingId, GuestName, StayPeriod

__all__ = [
    "BookingId",
    "GuestName",
    "InvalidDateRangeException",
    "PaymentMethod",
    "Reservation",
    "ReservationDetails",
    "ReservationFactory",
    "ReservationNotFoundException",
    "ReservationReportExporter",
    "ReservationRepository",
    "ReservationStatus",
    "Room",
    "RoomAlreadyOccupiedException",
    "RoomCategory",
    "RoomNotFoundException",
    "RoomRegistry",
    "StayPeriod",
]
