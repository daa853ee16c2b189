from abc import ABC, abstractmethod
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


class SnapshotRepository(ABC, Generic[T]):
    """Base class for repositories that persist a whole set of aggregates

    - The in-memory set is authoritative; the store holds the last snapshot
    """

    @abstractmethod
    def load_all(self) -> list[T]:
        """Load every aggregate from the last snapshot"""
        raise NotImplementedError

    @abstractmethod
    def save_all(self, aggregates: Sequence[T]) -> bool:
        """Overwrite the snapshot with the given aggregates"""
        raise NotImplementedError
