from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional


@dataclass(frozen=True)
class Index:
    """
    One index membership of a column.
    priority is the 1-based position of the column inside the index.
    """
    name: str
    priority: int = 1
    primary_key: Optional[bool] = None
    unique: Optional[bool] = None


def group_by_column(index_records: Iterable[Dict]) -> Dict[str, List[Index]]:
    """
    Turn table-level index definitions into per-column memberships.

    Each record: {"name", "columns": [...], "primary_key", "unique"}
    """
    grouped: Dict[str, List[Index]] = {}

    for record in index_records or []:
        if not record:
            continue

        for position, column_name in enumerate(record.get("columns") or [], start=1):
            grouped.setdefault(column_name, []).append(
                Index(
                    name=record.get("name", ""),
                    priority=position,
                    primary_key=record.get("primary_key"),
                    unique=record.get("unique"),
                )
            )

    return grouped
