from __future__ import annotations

from typing import Iterator

from hotel_reservation.hotel.domain.entity import Room
from hotel_reservation.hotel.domain.enum import RoomCategory
from hotel_reservation.hotel.domain.exception import RoomNotFoundException
from hotel_reservation.shared.domain import DuplicateResourceException

ROOM_CATALOG: tuple[tuple[RoomCategory, int, tuple[str, ...]], ...] = (
    (
        RoomCategory.STANDARD,
        101,
        ("Garden View", "Pool View", "City View", "Garden View", "Pool View"),
    ),
    (
        RoomCategory.DELUXE,
        201,
        ("Ocean View", "Mountain View", "Balcony", "Skyline View", "Sea Breeze"),
    ),
    (
        RoomCategory.SUITE,
        301,
        ("Presidential", "Honeymoon Suite", "Penthouse"),
    ),
)


class RoomRegistry:
    """In-memory catalog of hotel rooms, kept in registration order"""

    def __init__(self) -> None:
        self._rooms: dict[int, Room] = {}

    @classmethod
    def seeded(cls) -> RoomRegistry:
        """Registry holding the fixed room catalog"""
        registry = cls()
        registry.initialize()
        return registry

    def initialize(self) -> None:
        """Populate the fixed catalog, every room available"""
        for category, first_number, descriptions in ROOM_CATALOG:
            for offset, description in enumerate(descriptions):
                self.register(Room(first_number + offset, category, description))

    def register(self, room: Room) -> None:
        if room.room_number in self._rooms:
            raise DuplicateResourceException(
                f"Room {room.room_number} is already registered."
            )
        self._rooms[room.room_number] = room

    def find(self, room_number: int) -> Room | None:
        return self._rooms.get(room_number)

    def get(self, room_number: int) -> Room:
        room = self.find(room_number)
        if room is None:
            raise RoomNotFoundException(room_number)
        return room

    def search(self, category: RoomCategory | None = None) -> list[Room]:
        """Available rooms, optionally restricted to one category"""
        return [
            room
            for room in self._rooms.values()
            if room.available and (category is None or room.category == category)
        ]

    def set_availability(self, room_number: int, available: bool) -> None:
        self.get(room_number).set_available(available)

    def __iter__(self) -> Iterator[Room]:
        return iter(self._rooms.values())

    def __len__(self) -> int:
        return len(self._rooms)
