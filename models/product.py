# models/product.py
from enum import Enum
# Product model: the closed set of goods the tracker knows about.
class Product(str, Enum):
    APPLES = "Apples"
    BANANAS = "Bananas"
    ORANGES = "Oranges"

    def __str__(self) -> str:
        return self.value
