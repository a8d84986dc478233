"""
Default-value tag policy.

Structured (date/time) defaults made only of these characters are
zero-value sentinels and never pinned in a default tag, e.g.
'0000-00-00 00:00:00'. Columns listed as managed are timestamps the
ORM fills in itself.
"""

from dataclasses import dataclass
from typing import FrozenSet


@dataclass(frozen=True)
class DefaultValuePolicy:
    zero_value_chars: str
    managed_columns: FrozenSet[str]
    cast_marker: str = ""       # text from here on is a type cast, not the value


MANAGED_TIMESTAMP_COLUMNS = frozenset({"created_at", "updated_at"})

DEFAULT_VALUE_POLICY = DefaultValuePolicy(
    zero_value_chars="'0:- ",
    managed_columns=MANAGED_TIMESTAMP_COLUMNS,
)

DEFAULT_VALUE_POLICIES = {
    "mysql": DEFAULT_VALUE_POLICY,
    # postgres appends a cast to the literal: '00:00:00'::time without time zone
    "postgres": DefaultValuePolicy(
        zero_value_chars="'0:- ",
        managed_columns=MANAGED_TIMESTAMP_COLUMNS,
        cast_marker="::",
    ),
    "sqlite": DEFAULT_VALUE_POLICY,
    # sqlserver wraps defaults in parentheses: ((0))
    "sqlserver": DefaultValuePolicy(
        zero_value_chars="'0:- ()",
        managed_columns=MANAGED_TIMESTAMP_COLUMNS,
    ),
}


def get_default_value_policy(dialect: str = None) -> DefaultValuePolicy:
    """
    Policy for a dialect; unknown dialects use the mysql rules.
    """
    if not dialect:
        return DEFAULT_VALUE_POLICY
    return DEFAULT_VALUE_POLICIES.get(dialect.lower(), DEFAULT_VALUE_POLICY)
