from .exceptions import (
    InvalidDateRangeException,
    ReservationNotFoundException,
    RoomAlreadyOccupiedException,
    RoomNotFoundException,
)

__all__ = [
    "InvalidDateRangeException",
    "ReservationNotFoundException",
    "RoomAlreadyOccupiedException",
    "RoomNotFoundException",
]
