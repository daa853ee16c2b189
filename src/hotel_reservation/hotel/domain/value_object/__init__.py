from .booking_id import BookingId
from .guest_name import GuestName
from .stay_period import StayPeriod

__all__ = ["BookingId", "GuestName", "StayPeriod"]
