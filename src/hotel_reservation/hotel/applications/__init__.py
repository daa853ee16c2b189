from .booking_manager import BookingManager
from .hotel_statistics import HotelStatistics

__all__ = ["BookingManager", "HotelStatistics"]
