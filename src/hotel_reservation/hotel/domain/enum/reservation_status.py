from enum import Enum


class ReservationStatus(str, Enum):
    """Reservation status"""

    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
