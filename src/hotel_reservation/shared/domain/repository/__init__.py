from .repository import SnapshotRepository

__all__ = ["SnapshotRepository"]
