from .console import ReservationConsole
from .request_models import BookingIdRequest, BookRoomRequest

__all__ = ["BookRoomRequest", "BookingIdRequest", "ReservationConsole"]
