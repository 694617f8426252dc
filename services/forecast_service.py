# services/forecast_service.py
"""
forecast_service.py

Predicts when a product will run out, from its sales history.

The daily sale rate is the cumulative quantity sold divided by the number of
days between the first and the last recorded sale. The depletion date is
counted from "now", not from the last sale:

    rate           = sold_quantity / total_days
    days_remaining = ceil(stock / rate)
    depletion_date = now + days_remaining days
"""

import math
from datetime import datetime, timedelta

from models.inventory import StockEntry
from models.product import Product
from models.report import INSUFFICIENT_DATA, NO_DATA, OK, Prediction
from utils.dates import days_between

NO_SALES_DATA = "No sales data available."
INSUFFICIENT_DATA_MSG = "Insufficient data to predict."


def predict_depletion(product: Product | str, entry: StockEntry | None, now: datetime | None = None) -> Prediction:
    if entry is None or not entry.has_sales:
        return Prediction(product, NO_DATA, NO_SALES_DATA)

    dates = entry.sale_dates
    if len(dates) < 2:
        return Prediction(product, INSUFFICIENT_DATA, INSUFFICIENT_DATA_MSG)

    total_days = days_between(dates[0], dates[-1])
    # sales sharing one timestamp (or recorded backwards) give no usable window
    if total_days <= 0 or entry.sold_quantity <= 0:
        return Prediction(product, INSUFFICIENT_DATA, INSUFFICIENT_DATA_MSG)

    rate = entry.sold_quantity / total_days  # items per day
    days_remaining = math.ceil(entry.quantity / rate)

    if now is None:
        now = datetime.now()
    depletion_date = (now + timedelta(days=days_remaining)).date()

    return Prediction(
        product,
        OK,
        f"Expected to run out on {depletion_date.isoformat()}",
        depletion_date=depletion_date,
        days_remaining=days_remaining,
    )
