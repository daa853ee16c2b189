from __future__ import annotations

from enum import Enum


class PaymentMethod(str, Enum):
    """How the guest pays"""

    CARD = "Card"
    GCASH = "GCash"
    CASH = "Cash"

    @classmethod
    def from_menu_choice(cls, choice: str) -> PaymentMethod:
        """Map the console choice to a method; anything unrecognised is cash"""
        return {"1": cls.CARD, "2": cls.GCASH}.get(choice.strip(), cls.CASH)
