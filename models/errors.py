# models/errors.py
# Errors raised by inventory operations. They subclass ValueError so callers
# that already catch ValueError keep working.


class InventoryError(ValueError):
    """Base class for rejected inventory operations."""


class UnknownProduct(InventoryError):
    def __init__(self, product, action: str = "sell"):
        self.product = product
        super().__init__(f"Cannot {action} {product} as it does not exist in inventory.")


class InsufficientStock(InventoryError):
    def __init__(self, product, available: int, requested: int):
        self.product = product
        self.available = available
        self.requested = requested
        super().__init__(
            f"Cannot sell {product}. Available quantity: {available}. "
            f"Sale size: {requested}"
        )


class InvalidQuantity(InventoryError):
    def __init__(self, quantity, reason: str):
        self.quantity = quantity
        self.reason = reason
        super().__init__(f"Invalid quantity {quantity!r}: {reason}")


class InvalidSaleDate(InventoryError):
    def __init__(self, value):
        self.value = value
        super().__init__(
            f"Invalid sale date {value!r}: expected a date or datetime, "
            f"got {type(value).__name__}"
        )
