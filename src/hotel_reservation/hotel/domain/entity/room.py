from hotel_reservation.hotel.domain.enum import RoomCategory
from hotel_reservation.shared.domain import Entity


class Room(Entity[int]):
    """Hotel room, identified by its room number"""

    def __init__(
        self,
        room_number: int,
        category: RoomCategory,
        description: str,
        available: bool = True,
    ) -> None:
        super().__init__(room_number)
        self._category = category
        self._description = description
        self._available = available

    @property
    def room_number(self) -> int:
        return self._id

    @property
    def category(self) -> RoomCategory:
        return self._category

    @property
    def description(self) -> str:
        return self._description

    @property
    def available(self) -> bool:
        return self._available

    def set_available(self, available: bool) -> None:
        self._available = available

    def __repr__(self) -> str:
        return (
            f"Room({self.room_number}, {self._category.name}, "
            f"{self._description!r}, available={self._available})"
        )
