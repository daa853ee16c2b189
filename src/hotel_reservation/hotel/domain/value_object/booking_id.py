from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class BookingId:
    """Booking id, e.g. BK1001"""

    PREFIX: ClassVar[str] = "BK"

    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not normalized:
            raise ValueError("Booking id cannot be empty")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_sequence(cls, sequence: int) -> BookingId:
        """Build the id for a counter value"""
        return cls(value=f"{cls.PREFIX}{sequence}")
