from dataclasses import dataclass, field
from typing import Callable, Dict, Mapping

from fieldgen.canonical.column import Column, ColumnBuilder, TypeOverride
from fieldgen.canonical.index import Index
from fieldgen.pipeline.field_assembler import PromotionOptions
from fieldgen.standards.default_policy import DefaultValuePolicy, get_default_value_policy
from fieldgen.standards.naming import get_naming_strategy
from fieldgen.utils.exceptions import ConfigError


def _fixed_override(type_name: str) -> TypeOverride:
    return lambda column: type_name


def _parse_type_overrides(raw) -> Dict[str, TypeOverride]:
    if not raw:
        return {}

    if not isinstance(raw, Mapping):
        raise ConfigError("settings.type_overrides must be a mapping")

    overrides: Dict[str, TypeOverride] = {}
    for database_type_name, type_name in raw.items():
        if not isinstance(type_name, str) or not type_name:
            raise ConfigError(
                f"Type override for '{database_type_name}' must be a non-empty string"
            )
        overrides[database_type_name] = _fixed_override(type_name)
    return overrides


def _flag(settings: Mapping, key: str) -> bool:
    value = settings.get(key, False)
    if not isinstance(value, bool):
        raise ConfigError(
            f"settings.{key} must be true or false, got {value!r}"
        )
    return value


@dataclass(frozen=True)
class GenerationSettings:
    """
    Per-run generation options shared by every column.
    """
    options: PromotionOptions = PromotionOptions()
    use_scan_type: bool = False
    json_tag_ns: Callable[[str], str] = field(default=get_naming_strategy("identity"))
    type_overrides: Mapping[str, TypeOverride] = field(default_factory=dict)
    default_policy: DefaultValuePolicy = get_default_value_policy()

    @classmethod
    def from_dict(cls, settings: Dict, dialect: str = None) -> "GenerationSettings":
        settings = settings or {}
        if not isinstance(settings, Mapping):
            raise ConfigError("settings must be a mapping")

        return cls(
            options=PromotionOptions(
                nullable=_flag(settings, "field_nullable"),
                coverable=_flag(settings, "field_coverable"),
                signable=_flag(settings, "field_signable"),
            ),
            use_scan_type=_flag(settings, "use_scan_type"),
            json_tag_ns=get_naming_strategy(settings.get("json_tag_naming", "identity")),
            type_overrides=_parse_type_overrides(settings.get("type_overrides")),
            default_policy=get_default_value_policy(dialect),
        )

    def configure(self, column: Column, indexes) -> Column:
        return (
            ColumnBuilder(column)
            .with_indexes(indexes)
            .with_data_type_map(self.type_overrides)
            .with_scan_type_preference(self.use_scan_type)
            .with_json_tag_ns(self.json_tag_ns)
            .with_default_policy(self.default_policy)
            .build()
        )
