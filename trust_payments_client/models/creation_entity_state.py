from enum import Enum


class CreationEntityState(str, Enum):
    CREATE = "CREATE"
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    DELETING = "DELETING"
    DELETED = "DELETED"

    def __str__(self) -> str:
        return str(self.value)
