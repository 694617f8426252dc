# services/tracker_service.py

import logging
from datetime import date, datetime
from typing import Callable

from models.errors import InventoryError, UnknownProduct
from models.inventory import Inventory, StockEntry
from models.product import Product
from models.report import Prediction, ReportLine, StockWarning
from services.forecast_service import predict_depletion
from services.report_service import ReportService
from services.warning_service import WarningService
from utils.dates import as_datetime


def to_product(product, action: str = "sell") -> Product:
    # "Apples" -> Product.APPLES; anything outside the enumeration is unknown
    if isinstance(product, Product):
        return product
    try:
        return Product(product)
    except ValueError:
        raise UnknownProduct(product, action) from None


class InventoryTracker:
    """
    In-memory stock and sales accounting for a fixed set of products.

    add() and sell() either fully apply or raise an InventoryError leaving
    the state untouched. Not thread-safe: callers sharing a tracker between
    threads must guard it with their own lock.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = datetime.now,
        warnings: WarningService | None = None,
        logger: logging.Logger | None = None,
    ):
        self.clock = clock
        self.logger = logger or logging.getLogger("inventory_tracker")
        self.inventory = Inventory()
        self.warning_service = warnings or WarningService.default(
            logger=self.logger.getChild("warnings")
        )
        self.report_service = ReportService(self.inventory, logger=self.logger.getChild("report"))

    def add(self, product: Product, quantity: int) -> None:
        try:
            product = to_product(product, "add")
            entry = self.inventory.add_stock(product, quantity)
        except InventoryError as e:
            self.logger.error(str(e))
            raise
        self.logger.info(f"Added {quantity} {product}, stock now {entry.quantity}")

    def sell(
        self,
        product: Product,
        quantity: int,
        sale_date: date | datetime | None = None,
    ) -> list[StockWarning]:
        try:
            product = to_product(product)
            sold_at = as_datetime(sale_date if sale_date is not None else self.clock())
            entry = self.inventory.record_sale(product, quantity, sold_at)
        except InventoryError as e:
            self.logger.error(str(e))
            raise

        self.logger.info(f"Sold {quantity} {product} at {sold_at.isoformat()}, stock now {entry.quantity}")
        return self.issue_warnings(product)

    def issue_warnings(self, product: Product) -> list[StockWarning]:
        entry = self.inventory.get(to_product(product, "look up"))
        if entry is None:
            return []
        return self.warning_service.check(entry, {"now": self.clock()})

    def predict(self, product: Product) -> Prediction:
        try:
            product = to_product(product)
        except UnknownProduct:
            return predict_depletion(product, None)
        return predict_depletion(product, self.inventory.get(product), self.clock())

    def get_prediction(self, product: Product) -> str:
        return self.predict(product).message

    def report(self) -> list[ReportLine]:
        lines = self.report_service.build(self.clock())
        self.report_service.emit(lines)
        return lines

    def get_stock(self, product: Product) -> int:
        entry = self.get_entry(product)
        return entry.quantity if entry else 0

    def get_entry(self, product: Product) -> StockEntry | None:
        # names outside the enumeration simply have no entry
        try:
            product = to_product(product, "look up")
        except UnknownProduct:
            return None
        return self.inventory.get(product)
