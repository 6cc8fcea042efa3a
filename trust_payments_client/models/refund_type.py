from enum import Enum


class RefundType(str, Enum):
    MERCHANT_INITIATED_ONLINE = "MERCHANT_INITIATED_ONLINE"
    MERCHANT_INITIATED_OFFLINE = "MERCHANT_INITIATED_OFFLINE"
    CUSTOMER_INITIATED_AUTOMATIC = "CUSTOMER_INITIATED_AUTOMATIC"
    CUSTOMER_INITIATED_MANUAL = "CUSTOMER_INITIATED_MANUAL"

    def __str__(self) -> str:
        return str(self.value)
