import re
from typing import Tuple

# [[...]] marker carrying a validation directive inside a column comment
BINDING_PATTERN = re.compile(r".*\[\[(.*)]].*")


def extract_binding(comment: str) -> Tuple[str, str]:
    """
    Split a column comment into (cleaned comment, binding directive).

    "user email [[required]]" → ("user email ", "required")

    A missing or unbalanced marker leaves the comment untouched and
    returns an empty directive.
    """
    if not comment:
        return comment or "", ""

    match = BINDING_PATTERN.search(comment)
    if match is None:
        return comment, ""

    binding = match.group(1)
    return comment.replace(f"[[{binding}]]", "", 1), binding
