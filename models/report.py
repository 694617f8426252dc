# models/report.py
from dataclasses import dataclass
from datetime import date

from models.product import Product

# Prediction statuses
NO_DATA = "no_data"
INSUFFICIENT_DATA = "insufficient_data"
OK = "ok"


# A warning raised by the stock warning policy after a sale.
@dataclass(frozen=True)
class StockWarning:
    product: Product
    kind: str
    quantity: int
    message: str


@dataclass(frozen=True)
class Prediction:
    # a plain str when the name is not a Product
    product: Product | str
    status: str
    message: str
    depletion_date: date | None = None
    days_remaining: int | None = None


# One row of the inventory report.
@dataclass(frozen=True)
class ReportLine:
    product: Product
    quantity: int
    prediction: str

    def __str__(self) -> str:
        return f"{self.product}: {self.quantity}, {self.prediction}"
