from hotel_reservation.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)


class RoomNotFoundException(ResourceNotFoundException):
    """No room with the given number"""

    def __init__(self, room_number: int) -> None:
        super().__init__(f"Room {room_number} does not exist.")
        self.room_number = room_number


class ReservationNotFoundException(ResourceNotFoundException):
    """No reservation with the given booking id"""

    def __init__(self, booking_id: object) -> None:
        super().__init__(f"Booking {booking_id} not found.")
        self.booking_id = booking_id


class RoomAlreadyOccupiedException(BusinessRuleViolationException):
    """The room already holds a confirmed reservation"""

    def __init__(self, room_number: int) -> None:
        super().__init__(f"Room {room_number} is already occupied.")
        self.room_number = room_number


class InvalidDateRangeException(BusinessRuleViolationException):
    """Check-out is not strictly after check-in"""

    def __init__(self, message: str = "Check-out must be after check-in.") -> None:
        super().__init__(message)
