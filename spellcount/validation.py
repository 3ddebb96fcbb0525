from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator
from pydantic import ValidationError

from spellcount.models.records import Database


SCHEMA_DIR = Path(__file__).resolve().parent / "schemas"


class PrettyError(Exception):
    pass


class ConfigurationError(PrettyError):
    """Content or settings data that cannot be used as authored."""


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _read_yaml(path: Path) -> Any:
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def read_payload(path: Path) -> Any:
    """Read a YAML or JSON file, chosen by suffix."""
    try:
        if path.suffix.lower() in {".yaml", ".yml"}:
            return _read_yaml(path)
        return _read_json(path)
    except (OSError, UnicodeDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e


_def_schemas = {
    "database": SCHEMA_DIR / "database.schema.json",
}


def _validate_jsonschema(obj: Any, schema_path: Path) -> None:
    schema = _read_json(schema_path)
    v = Draft202012Validator(schema)
    errors = sorted(v.iter_errors(obj), key=lambda e: list(e.path))
    if errors:
        lines = []
        for e in errors[:5]:
            ptr = "/" + "/".join([str(p) for p in e.path])
            lines.append(f"- {ptr or '/'}: {e.message}")
        more = "" if len(errors) <= 5 else f" (+{len(errors)-5} more)"
        raise ConfigurationError("JSON Schema validation failed:\n" + "\n".join(lines) + more)


def format_validation_error(e: ValidationError) -> str:
    lines = []
    errs = e.errors(include_url=False)
    for err in errs[:5]:
        loc = "/".join(str(p) for p in err["loc"])
        lines.append(f"- {loc or '/'}: {err['msg']}")
    more = "" if len(errs) <= 5 else f" (+{len(errs)-5} more)"
    return "\n".join(lines) + more


# Public API


def parse_database(data: Any) -> Database:
    if data is None:
        data = {}
    _validate_jsonschema(data, _def_schemas["database"])
    try:
        return Database.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError("Invalid database:\n" + format_validation_error(e)) from e


def load_database(path: Path) -> Database:
    return parse_database(read_payload(path))


__all__ = [
    "ConfigurationError",
    "PrettyError",
    "format_validation_error",
    "load_database",
    "parse_database",
    "read_payload",
]
