from enum import Enum


class EntityQueryFilterType(str, Enum):
    LEAF = "LEAF"
    OR = "OR"
    AND = "AND"

    def __str__(self) -> str:
        return str(self.value)
