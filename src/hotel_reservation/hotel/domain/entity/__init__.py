from .reservation import Reservation
from .room import Room

__all__ = ["Reservation", "Room"]
