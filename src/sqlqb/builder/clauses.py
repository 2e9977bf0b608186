"""WHERE clause value objects."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union


class Delimiter(str, Enum):
    AND = "AND"
    OR = "OR"


@dataclass(frozen=True)
class StructuredClause:
    """A ``column operator value`` condition."""

    column: str
    operator: str
    value: str
    delimiter: Delimiter = Delimiter.AND

    def render(self, parse_value: Callable[[str], str]) -> str:
        return f"{self.column} {self.operator} {parse_value(self.value)}"

    def to_dict(self) -> dict:
        return {
            "type": "structured",
            "column": self.column,
            "operator": self.operator,
            "value": self.value,
            "delimiter": self.delimiter.value,
        }


@dataclass(frozen=True)
class RawClause:
    """A verbatim SQL fragment. Never escaped."""

    sql: str
    delimiter: Delimiter = Delimiter.AND

    def render(self, parse_value: Callable[[str], str]) -> str:
        return self.sql

    def to_dict(self) -> dict:
        return {"type": "raw", "sql": self.sql, "delimiter": self.delimiter.value}


Clause = Union[StructuredClause, RawClause]
