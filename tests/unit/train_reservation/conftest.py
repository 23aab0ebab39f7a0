from unittest.mock import MagicMock

import pytest

from train_reservation.reservation.applications import ReservationManager


@pytest.fixture
def manager():
    """既定カタログ（101: 50席, 202: 75席）の ReservationManager"""
    return ReservationManager.with_default_catalog(first_ticket_id=1001)


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()
