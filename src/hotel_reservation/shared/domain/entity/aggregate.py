from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """Base class for aggregate roots.

    - Entities inside the aggregate are only reached through the root
    - Persistence boundary == aggregate boundary
    """
