from __future__ import annotations

from decimal import Decimal
from enum import Enum


class RoomCategory(Enum):
    """Room category with its display label and nightly rate"""

    STANDARD = ("Standard", Decimal("2500"))
    DELUXE = ("Deluxe", Decimal("4800"))
    SUITE = ("Suite", Decimal("9500"))

    def __init__(self, label: str, nightly_rate: Decimal) -> None:
        self.label = label
        self.nightly_rate = nightly_rate

