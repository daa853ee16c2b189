from .payment_method import PaymentMethod
from .reservation_status import ReservationStatus
from .room_category import RoomCategory

__all__ = ["PaymentMethod", "ReservationStatus", "RoomCategory"]
