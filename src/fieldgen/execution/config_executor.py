import os
from typing import Dict, List

import yaml

from fieldgen.outputs.field_exporter import write_records
from fieldgen.router import route
from fieldgen.utils.exceptions import ConfigError

OUTPUT_FORMATS = ("JSON", "YAML", "ALL_FORMATS")


class ConfigExecutor:
    """
    Runs field generation from a YAML configuration.

        dialect: mysql
        settings: {field_nullable: true, json_tag_naming: lower_camel}
        tables:
          - name: users
            indexes: [{name: idx_email, columns: [email], unique: true}]
            columns: [{name: id, database_type_name: bigint, primary_key: true}]
    """

    def __init__(self, config_path: str, user_id: str = "config_executor"):
        self.config_path = config_path
        self.user_id = user_id
        self.config = self._load_config()

    # ------------------------------------------
    # Load YAML
    # ------------------------------------------
    def _load_config(self) -> Dict:
        if not os.path.exists(self.config_path):
            raise ConfigError(f"Config file not found: {self.config_path}")

        with open(self.config_path, "r", encoding="utf-8") as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Config root must be a mapping: {self.config_path}")

        if not isinstance(config.get("tables"), list) or not config["tables"]:
            raise ConfigError("Config must declare at least one table under 'tables'")

        return config

    def _build_payload(self) -> Dict:
        cfg = self.config
        return {
            "dialect": cfg.get("dialect"),
            "settings": cfg.get("settings", {}),
            "tables": cfg["tables"],
            "user_id": self.user_id,
        }

    def execute(self, output_dir: str = None, output_format: str = "ALL_FORMATS") -> Dict:
        result = route(self._build_payload())
        if output_dir:
            self._save_outputs(result, output_dir, output_format)
        return result

    # ------------------------------------------
    # Save Outputs
    # ------------------------------------------
    def _save_outputs(self, result: Dict, output_dir: str, output_format: str) -> List[str]:
        output_format = (output_format or "ALL_FORMATS").upper()
        if output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Invalid output format '{output_format}'. "
                f"Allowed values: {', '.join(OUTPUT_FORMATS)}"
            )

        os.makedirs(output_dir, exist_ok=True)
        written = []

        for table_name, fields in result.get("tables", {}).items():
            if output_format in ("JSON", "ALL_FORMATS"):
                path = os.path.join(output_dir, f"{table_name}.json")
                write_records(fields, path)
                written.append(path)

            if output_format in ("YAML", "ALL_FORMATS"):
                path = os.path.join(output_dir, f"{table_name}.yaml")
                write_records(fields, path)
                written.append(path)

        return written
