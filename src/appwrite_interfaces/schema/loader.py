"""Schema file loading. JSON by default, YAML for ``.yaml``/``.yml`` files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from appwrite_interfaces.errors import SchemaLoadError
from appwrite_interfaces.schema.models import SchemaDocument

logger = logging.getLogger(__name__)

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def load_schema(path: str | Path) -> SchemaDocument:
    """Read and validate a schema file.

    Raises SchemaLoadError for anything that prevents generation: a missing
    or unreadable file, a parse error, a non-mapping root, or collections
    lacking ``databaseId``/``name``.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SchemaLoadError(f"Cannot read schema file {path}: {exc}") from exc

    data = parse_schema_text(text, path)

    try:
        schema = SchemaDocument.model_validate(data)
    except ValidationError as exc:
        raise SchemaLoadError(f"Invalid schema in {path}: {exc}") from exc

    logger.debug("Loaded %d collections from %s", len(schema.collections), path)
    return schema


def parse_schema_text(text: str, path: Path) -> dict[str, Any]:
    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            raw_data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise SchemaLoadError(f"Malformed YAML in {path}: {exc}") from exc
    else:
        try:
            raw_data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SchemaLoadError(f"Malformed JSON in {path}: {exc}") from exc

    if raw_data is None:
        raise SchemaLoadError(f"Empty schema file: {path}")
    if not isinstance(raw_data, dict):
        raise SchemaLoadError(f"Schema root must be an object: {path}")
    return raw_data
