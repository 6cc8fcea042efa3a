from enum import Enum


class ProductFeeType(str, Enum):
    METERED_FEE = "METERED_FEE"
    SETUP_FEE = "SETUP_FEE"
    PERIOD_FEE = "PERIOD_FEE"

    def __str__(self) -> str:
        return str(self.value)
