from enum import Enum


class RefundState(str, Enum):
    CREATE = "CREATE"
    SCHEDULED = "SCHEDULED"
    PENDING = "PENDING"
    MANUAL_CHECK = "MANUAL_CHECK"
    FAILED = "FAILED"
    SUCCESSFUL = "SUCCESSFUL"

    def __str__(self) -> str:
        return str(self.value)
