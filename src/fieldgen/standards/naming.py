import re
from typing import Callable, Dict

from fieldgen.utils.exceptions import ConfigError

_WORD_SPLIT = re.compile(r"[_\-\s]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _words(column_name: str):
    return [w for w in _WORD_SPLIT.split(column_name) if w]


def to_snake(column_name: str) -> str:
    return "_".join(
        w.lower() for w in _WORD_SPLIT.split(_CAMEL_BOUNDARY.sub("_", column_name)) if w
    )


def to_upper_camel(column_name: str) -> str:
    return "".join(w[:1].upper() + w[1:] for w in _words(column_name))


def to_lower_camel(column_name: str) -> str:
    camel = to_upper_camel(column_name)
    return camel[:1].lower() + camel[1:]


NAMING_STRATEGIES: Dict[str, Callable[[str], str]] = {
    "identity": lambda column_name: column_name,
    "snake": to_snake,
    "lower_camel": to_lower_camel,
    "upper_camel": to_upper_camel,
}


def get_naming_strategy(name: str) -> Callable[[str], str]:
    """
    Serialization-key transform by strategy name.
    """
    key = (name or "identity").lower()

    if key not in NAMING_STRATEGIES:
        raise ConfigError(
            f"Unknown json tag naming strategy: {name}. "
            f"Allowed values: {', '.join(NAMING_STRATEGIES)}"
        )

    return NAMING_STRATEGIES[key]
