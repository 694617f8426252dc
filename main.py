# main.py
# Demo run of the inventory tracker: a year of apple sales, one bad sale,
# then the inventory report.
import os
from datetime import date

from models.errors import InventoryError
from models.product import Product
from services.tracker_service import InventoryTracker
from utils.logger import setup_logger


def run_demo(tracker: InventoryTracker) -> None:
    tracker.add(Product.APPLES, 50)
    tracker.sell(Product.APPLES, 50, date(2024, 4, 1))
    tracker.add(Product.APPLES, 50)
    tracker.sell(Product.APPLES, 20, date(2024, 7, 1))
    tracker.add(Product.APPLES, 50)
    tracker.sell(Product.APPLES, 60, date(2024, 11, 1))

    try:
        tracker.sell(Product.ORANGES, 150)
    except InventoryError:
        # already logged by the tracker, the demo carries on
        pass


def main():
    logger = setup_logger(log_dir=os.environ.get("INVENTORY_LOG_DIR", "data/logs"))
    tracker = InventoryTracker(logger=logger)
    run_demo(tracker)
    tracker.report()


if __name__ == "__main__":
    main()
