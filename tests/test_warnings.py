"""Tests for the stock warning rules and days-until-Christmas."""
import logging
from datetime import datetime

import pytest

from models.inventory import StockEntry
from models.product import Product
from services.warning_service import (
    LOW_INVENTORY,
    SEASONAL_LOW_INVENTORY,
    LowStockRule,
    SeasonalLowStockRule,
    WarningService,
)
from utils.dates import days_until_christmas

SPRING = datetime(2025, 3, 1)
NOVEMBER = datetime(2025, 11, 1)


@pytest.mark.parametrize(
    "now, expected",
    [
        (datetime(2025, 12, 25), 0),
        (datetime(2025, 12, 24), 1),
        (datetime(2025, 12, 24, 6), 1),
        (datetime(2025, 10, 26), 60),
        (datetime(2025, 10, 27), 59),
        (datetime(2025, 12, 26), -1),
    ],
)
def test_days_until_christmas(now, expected):
    assert days_until_christmas(now) == expected


def _kinds(quantity, now):
    entry = StockEntry(Product.APPLES, quantity=quantity)
    return [w.kind for w in WarningService.default().check(entry, {"now": now})]


def test_no_warning_with_plenty_of_stock():
    assert _kinds(30, NOVEMBER) == []


def test_low_stock_only_outside_season():
    assert _kinds(19, SPRING) == [LOW_INVENTORY]
    assert _kinds(20, SPRING) == []


def test_seasonal_only_between_thresholds():
    assert _kinds(25, NOVEMBER) == [SEASONAL_LOW_INVENTORY]
    assert _kinds(25, SPRING) == []


def test_both_warnings_fire_together():
    assert _kinds(5, NOVEMBER) == [LOW_INVENTORY, SEASONAL_LOW_INVENTORY]


def test_seasonal_window_boundary():
    rule = SeasonalLowStockRule()
    assert not rule.in_window(datetime(2025, 10, 26))
    assert rule.in_window(datetime(2025, 10, 27))


def test_warning_messages():
    entry = StockEntry(Product.BANANAS, quantity=3)
    low = LowStockRule().check(entry, {})
    seasonal = SeasonalLowStockRule().check(entry, {"now": NOVEMBER})
    assert low.message == "Warning: Inventory for Bananas is below 20."
    assert seasonal.message == (
        "Warning: Inventory for Bananas is below 30 and there are fewer than 60 days until Christmas."
    )
    assert low.quantity == 3


def test_warnings_are_logged(caplog):
    entry = StockEntry(Product.APPLES, quantity=1)
    with caplog.at_level(logging.WARNING, logger="inventory_tracker"):
        WarningService.default().check(entry, {"now": NOVEMBER})
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 2


def test_custom_rules():
    service = WarningService([LowStockRule(threshold=5)])
    entry = StockEntry(Product.APPLES, quantity=7)
    assert service.check(entry) == []
