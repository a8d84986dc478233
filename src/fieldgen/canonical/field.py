from dataclasses import dataclass, field
from typing import Dict

from fieldgen.canonical.gorm_tag import GormTag

TAG_KEY_GORM = "gorm"
TAG_KEY_JSON = "json"
TAG_KEY_BINDING = "binding"


@dataclass(frozen=True)
class Field:
    """
    Generated struct member for one column.
    Language-agnostic; the render stage turns it into source text.

    Compared by value but not hashable: gorm_tag and tag are mutable
    containers.
    """
    __hash__ = None

    name: str
    type: str                   # int64, *string, gorm.DeletedAt ...
    column_name: str

    multiline_comment: bool = False
    gorm_tag: GormTag = field(default_factory=GormTag)
    tag: Dict[str, str] = field(default_factory=dict)
    column_comment: str = ""

    def tags(self) -> str:
        """
        Full struct tag: gorm first, then the remaining keys sorted.
        """
        parts = []

        gorm = self.gorm_tag.build()
        if gorm:
            parts.append(f'{TAG_KEY_GORM}:"{gorm}"')

        for key in sorted(self.tag):
            if key == TAG_KEY_GORM:
                continue
            parts.append(f'{key}:"{self.tag[key]}"')

        return " ".join(parts)
