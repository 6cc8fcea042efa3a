from enum import Enum


class TransactionState(str, Enum):
    CREATE = "CREATE"
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PROCESSING = "PROCESSING"
    FAILED = "FAILED"
    AUTHORIZED = "AUTHORIZED"
    VOIDED = "VOIDED"
    COMPLETED = "COMPLETED"
    FULFILL = "FULFILL"
    DECLINE = "DECLINE"

    def __str__(self) -> str:
        return str(self.value)
