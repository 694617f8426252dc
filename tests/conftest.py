from datetime import datetime

import pytest

from services.tracker_service import InventoryTracker

# far from Christmas, so only the plain low-stock rule can fire
SPRING = datetime(2025, 3, 1, 12, 0)
# 54 days before Christmas
NOVEMBER = datetime(2025, 11, 1, 0, 0)


@pytest.fixture
def spring():
    return SPRING


@pytest.fixture
def tracker():
    return InventoryTracker(clock=lambda: SPRING)


@pytest.fixture
def november_tracker():
    return InventoryTracker(clock=lambda: NOVEMBER)
