from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class GuestName:
    """Guest name as printed on the booking

    Runs of whitespace collapse to a single space, so "  Juan   dela Cruz "
    and "Juan dela Cruz" are the same guest.
    """

    MAX_LENGTH: ClassVar[int] = 100

    value: str

    def __post_init__(self) -> None:
        normalized = " ".join(self.value.split())
        if not normalized:
            raise ValueError("Guest name cannot be empty")
        if len(normalized) > self.MAX_LENGTH:
            raise ValueError(
                f"Guest name is too long (max {self.MAX_LENGTH} characters)"
            )
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
