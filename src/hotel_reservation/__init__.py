"""Hotel reservation desk: room registry, bookings and flat-file persistence"""

__version__ = "1.0.0"
