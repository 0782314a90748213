"""Generate JSON Schema for the check suite YAML format."""

from __future__ import annotations

import json
from pathlib import Path

from matchbook.config import SuiteConfig


def generate_json_schema() -> dict:
    schema = SuiteConfig.model_json_schema()
    schema["title"] = "matchbook check suite"
    return schema


def write_json_schema(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")
