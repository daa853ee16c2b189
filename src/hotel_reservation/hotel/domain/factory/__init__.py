from .reservation_factory import ReservationDetails, ReservationFactory

__all__ = ["ReservationDetails", "ReservationFactory"]
