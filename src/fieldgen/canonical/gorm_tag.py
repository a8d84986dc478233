from typing import Dict, Iterator, List

TAG_KEY_GORM_COLUMN = "column"
TAG_KEY_GORM_TYPE = "type"
TAG_KEY_GORM_PRIMARY_KEY = "primaryKey"
TAG_KEY_GORM_AUTO_INCREMENT = "autoIncrement"
TAG_KEY_GORM_NOT_NULL = "not null"
TAG_KEY_GORM_UNIQUE_INDEX = "uniqueIndex"
TAG_KEY_GORM_INDEX = "index"
TAG_KEY_GORM_DEFAULT = "default"
TAG_KEY_GORM_COMMENT = "comment"

# Keys missing from this table keep declaration order after the ranked ones.
_TAG_KEY_PRIORITIES = {
    TAG_KEY_GORM_COLUMN: 0,
    TAG_KEY_GORM_TYPE: 1,
    TAG_KEY_GORM_PRIMARY_KEY: 2,
    TAG_KEY_GORM_AUTO_INCREMENT: 3,
    TAG_KEY_GORM_NOT_NULL: 4,
}
_UNRANKED = len(_TAG_KEY_PRIORITIES)


class GormTag:
    """
    Ordered storage-mapping tag set.

    Each key holds one or many values:
    - set() replaces the values of a key
    - append() accumulates (repeated index keys)
    """

    def __init__(self, initial: Dict[str, List[str]] = None):
        self._values: Dict[str, List[str]] = {}
        for key, values in (initial or {}).items():
            self._values[key] = list(values)

    def set(self, key: str, value: str) -> "GormTag":
        self._values[key] = [value]
        return self

    def append(self, key: str, *values: str) -> "GormTag":
        self._values.setdefault(key, []).extend(values)
        return self

    def get(self, key: str) -> List[str]:
        return list(self._values.get(key, []))

    def keys(self) -> List[str]:
        return list(self._values)

    def to_dict(self) -> Dict[str, List[str]]:
        return {key: list(values) for key, values in self._values.items()}

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    # mutable through set/append
    __hash__ = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GormTag):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"GormTag({self._values!r})"

    def build(self) -> str:
        """
        Serialize as `key:value;key;...`.
        A key with an empty value renders bare.
        """
        ordered = sorted(
            self._values,
            key=lambda k: _TAG_KEY_PRIORITIES.get(k, _UNRANKED),
        )

        parts: List[str] = []
        for key in ordered:
            values = self._values[key]
            if not values:
                parts.append(key)
                continue
            for value in values:
                parts.append(f"{key}:{value}" if value != "" else key)

        return ";".join(parts)
