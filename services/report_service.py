# services/report_service.py
import logging
from datetime import datetime

from models.inventory import Inventory
from models.report import ReportLine
from services.forecast_service import predict_depletion

REPORT_HEADER = "Current Inventory:"


# report_service.py is a service module (Service Layer)
# with the class name ReportService, responsible for the inventory report:
# current stock and depletion prediction for every product.
class ReportService:
    def __init__(self, inventory: Inventory, logger: logging.Logger | None = None):
        self.inventory = inventory
        self.logger = logger or logging.getLogger("inventory_tracker.report")

    def build(self, now: datetime | None = None) -> list[ReportLine]:
        # One line per product that has an inventory entry, sorted by name.
        lines = []
        for product in self.inventory.products():
            entry = self.inventory.get(product)
            prediction = predict_depletion(product, entry, now)
            lines.append(ReportLine(product, entry.quantity, prediction.message))
        return lines

    def emit(self, lines: list[ReportLine]) -> None:
        self.logger.info(REPORT_HEADER)
        for line in lines:
            self.logger.info(str(line))

