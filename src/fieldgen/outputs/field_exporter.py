import json
from typing import Dict, List

import yaml

from fieldgen.canonical.field import Field


def field_to_dict(field: Field) -> Dict:
    return {
        "name": field.name,
        "type": field.type,
        "column_name": field.column_name,
        "multiline_comment": field.multiline_comment,
        "gorm_tag": field.gorm_tag.to_dict(),
        "tag": dict(field.tag),
        "column_comment": field.column_comment,
        "tags": field.tags(),
    }


def records_to_json(records: List[Dict], indent: int = 2) -> str:
    return json.dumps(records, indent=indent)


def records_to_yaml(records: List[Dict]) -> str:
    return yaml.safe_dump(
        records,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


def write_records(records: List[Dict], file_path: str):
    """
    Format follows the file extension (.yaml / .yml, otherwise JSON).
    """
    if file_path.endswith((".yaml", ".yml")):
        content = records_to_yaml(records)
    else:
        content = records_to_json(records)

    with open(file_path, "w", encoding="utf-8") as f:
        f.write(content)


class FieldExporter:
    """
    Exports generated fields as JSON-serializable records.
    """

    def __init__(self, fields: List[Field]):
        self.fields = fields

    def export(self) -> List[Dict]:
        return [field_to_dict(f) for f in self.fields]
