from unittest.mock import MagicMock

import pytest

from hotel_reservation.hotel.domain.repository import RoomRegistry


@pytest.fixture
def registry():
    """Registry holding the fixed room catalog"""
    return RoomRegistry.seeded()


@pytest.fixture
def mock_repository():
    """Repository mock that starts empty and always saves"""
    repository = MagicMock()
    repository.load_all.return_value = []
    repository.save_all.return_value = True
    return repository
