# services/warning_service.py

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List

from models.inventory import StockEntry
from models.report import StockWarning
from utils.dates import days_until_christmas

LOW_INVENTORY = "low_inventory"
SEASONAL_LOW_INVENTORY = "seasonal_low_inventory"


class WarningRule(ABC):
    #Abstract base class for all stock warning rules.
    #Each rule looks at one product's entry and returns a warning or None.

    @abstractmethod
    def check(self, entry: StockEntry, context: Dict[str, Any]) -> StockWarning | None:
        pass


class LowStockRule(WarningRule):
    # Warn whenever stock drops below a fixed threshold.

    def __init__(self, threshold: int = 20):
        self.threshold = threshold

    def check(self, entry, context):
        if entry.quantity < self.threshold:
            return StockWarning(
                product=entry.product,
                kind=LOW_INVENTORY,
                quantity=entry.quantity,
                message=f"Warning: Inventory for {entry.product} is below {self.threshold}.",
            )
        return None


class SeasonalLowStockRule(WarningRule):
    """
    Warn about a higher threshold when Christmas is close.

    Fires when stock < threshold and fewer than window_days remain until
    December 25 of the current year.
    """

    def __init__(self, threshold: int = 30, window_days: int = 60):
        self.threshold = threshold
        self.window_days = window_days

    def in_window(self, now: datetime) -> bool:
        return days_until_christmas(now) < self.window_days

    def check(self, entry, context):
        # get "now" from context if provided for testability,
        # otherwise use real current time
        now: datetime = context.get("now") or datetime.now()

        if entry.quantity < self.threshold and self.in_window(now):
            return StockWarning(
                product=entry.product,
                kind=SEASONAL_LOW_INVENTORY,
                quantity=entry.quantity,
                message=(
                    f"Warning: Inventory for {entry.product} is below {self.threshold} "
                    f"and there are fewer than {self.window_days} days until Christmas."
                ),
            )
        return None


class WarningService:
    # The WarningService runs every registered rule against a product.
    # Rules are independent: all of them are checked, several may fire.

    def __init__(self, rules: List[WarningRule] | None = None, logger: logging.Logger | None = None):
        self.rules: List[WarningRule] = []
        self.logger = logger or logging.getLogger("inventory_tracker.warnings")
        for rule in rules or []:
            self.add_rule(rule)

    @classmethod
    def default(cls, logger: logging.Logger | None = None) -> "WarningService":
        return cls([LowStockRule(), SeasonalLowStockRule()], logger=logger)

    def add_rule(self, rule: WarningRule):
        self.rules.append(rule)

    def check(self, entry: StockEntry, context: Dict[str, Any] | None = None) -> List[StockWarning]:
        if context is None:
            context = {}

        warnings: List[StockWarning] = []
        for rule in self.rules:
            warning = rule.check(entry, context)
            if warning is not None:
                self.logger.warning(warning.message)
                warnings.append(warning)
        return warnings
