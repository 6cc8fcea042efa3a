from enum import Enum


class EntityQueryOrderByType(str, Enum):
    DESC = "DESC"
    ASC = "ASC"

    def __str__(self) -> str:
        return str(self.value)
