"""One-line condition syntax for the CLI and query files.

    age 18                  ->  where("age", "18")
    age > 18                ->  where("age", ">", "18")
    OR name "Bob Smith"     ->  or_where("name", "Bob Smith")
    OR age < 5              ->  or_where_compare("age", "<", "5")
    age > ""                ->  where("age", ">")
    RAW a = 1 OR b = 2      ->  where_raw("a = 1 OR b = 2")
    OR RAW deleted_at IS NULL  ->  or_where_raw("deleted_at IS NULL")
"""

import re
import shlex
from dataclasses import dataclass
from typing import Optional

from sqlqb.builder.query import QueryBuilder

_PREFIX = re.compile(r"^\s*(?P<or>or\s+)?(?:(?P<raw>raw)(?:\s+|$))?", re.IGNORECASE)


class ConditionSyntaxError(ValueError):
    """Raised when a condition string cannot be parsed."""
    pass


@dataclass(frozen=True)
class Condition:
    column: Optional[str] = None
    operator: Optional[str] = None
    value: Optional[str] = None
    raw: Optional[str] = None
    use_or: bool = False

    def apply(self, builder: QueryBuilder) -> QueryBuilder:
        if self.raw is not None:
            return builder.or_where_raw(self.raw) if self.use_or else builder.where_raw(self.raw)
        if self.operator is None:
            if self.use_or:
                return builder.or_where(self.column, self.value)
            return builder.where(self.column, self.value)
        if self.use_or:
            return builder.or_where_compare(self.column, self.operator, self.value)
        return builder.where(self.column, self.operator, self.value)


def parse_condition(text: str) -> Condition:
    """Parse one condition string into a ``Condition``."""
    match = _PREFIX.match(text)
    use_or = bool(match.group("or"))
    rest = text[match.end():]

    if match.group("raw"):
        fragment = rest.strip()
        if not fragment:
            raise ConditionSyntaxError(f"RAW condition has no SQL fragment: {text!r}")
        return Condition(raw=fragment, use_or=use_or)

    try:
        tokens = shlex.split(rest)
    except ValueError as e:
        raise ConditionSyntaxError(f"Cannot parse condition {text!r}: {e}") from e

    # An empty value falls back to the two-token form on both AND and OR
    if len(tokens) == 2 or (len(tokens) == 3 and tokens[2] == ""):
        return Condition(column=tokens[0], value=tokens[1], use_or=use_or)
    if len(tokens) == 3:
        return Condition(
            column=tokens[0], operator=tokens[1], value=tokens[2], use_or=use_or
        )
    raise ConditionSyntaxError(
        f"Expected 'column value' or 'column operator value', got {text!r}"
    )
