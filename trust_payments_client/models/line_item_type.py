from enum import Enum


class LineItemType(str, Enum):
    SHIPPING = "SHIPPING"
    DISCOUNT = "DISCOUNT"
    FEE = "FEE"
    PRODUCT = "PRODUCT"

    def __str__(self) -> str:
        return str(self.value)
