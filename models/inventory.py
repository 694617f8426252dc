# models/inventory.py
from dataclasses import dataclass, field
from datetime import datetime

from models.errors import InsufficientStock, InvalidQuantity, UnknownProduct
from models.product import Product


def _check_quantity(qty, allow_zero: bool) -> None:
    # bool is an int subclass, but True/False are never meant as quantities
    if isinstance(qty, bool) or not isinstance(qty, int):
        raise InvalidQuantity(qty, "quantity must be an integer")
    if qty < 0 or (qty == 0 and not allow_zero):
        bound = "non-negative" if allow_zero else "positive"
        raise InvalidQuantity(qty, f"quantity must be {bound}")


# Stock level and sales record of a single product, kept together so a sale
# updates both in one step.
@dataclass
class StockEntry:
    product: Product
    quantity: int = 0
    sold_quantity: int = 0
    sale_dates: list[datetime] = field(default_factory=list)

    @property
    def has_sales(self) -> bool:
        return bool(self.sale_dates)

    def add(self, qty: int) -> None:
        _check_quantity(qty, allow_zero=True)
        self.quantity += qty

    def record_sale(self, qty: int, sold_at: datetime) -> None:
        _check_quantity(qty, allow_zero=False)
        if qty > self.quantity:
            raise InsufficientStock(self.product, self.quantity, qty)
        # all checks passed, nothing below can fail
        self.quantity -= qty
        self.sold_quantity += qty
        self.sale_dates.append(sold_at)


# Inventory model holding one StockEntry per product.
class Inventory:
    def __init__(self):
        self.entries: dict[Product, StockEntry] = {}

    def add_stock(self, product: Product, qty: int) -> StockEntry:
        _check_quantity(qty, allow_zero=True)
        entry = self.entries.get(product)
        if entry is None:
            entry = self.entries[product] = StockEntry(product)
        entry.add(qty)
        return entry

    def record_sale(self, product: Product, qty: int, sold_at: datetime) -> StockEntry:
        entry = self.entries.get(product)
        if entry is None:
            raise UnknownProduct(product)
        entry.record_sale(qty, sold_at)
        return entry

    def get(self, product: Product) -> StockEntry | None:
        return self.entries.get(product)

    def stock_of(self, product: Product) -> int:
        entry = self.entries.get(product)
        return entry.quantity if entry else 0

    def products(self) -> list[Product]:
        # sorted by product name
        return sorted(self.entries, key=lambda p: p.value)
