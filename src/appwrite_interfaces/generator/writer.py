"""Writes rendered interfaces to ``<output>/<databaseId>/<Name>.ts``."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from appwrite_interfaces.config import GeneratorConfig
from appwrite_interfaces.errors import InterfaceWriteError
from appwrite_interfaces.generator.renderer import interface_filename, render_interface
from appwrite_interfaces.schema.models import Collection, SchemaDocument

logger = logging.getLogger(__name__)


def interface_path(collection: Collection, config: GeneratorConfig) -> Path:
    return config.output_dir / collection.database_id / interface_filename(
        collection.name, config
    )


def write_interface(collection: Collection, code: str, config: GeneratorConfig) -> Path:
    """Write one interface file, creating its database directory. Overwrites."""
    file_path = interface_path(collection, config)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(code, encoding="utf-8")
    except OSError as exc:
        raise InterfaceWriteError(f"Failed to write {file_path}: {exc}") from exc
    logger.debug("Wrote %s (%d bytes)", file_path, len(code))
    return file_path


def generate_interfaces(
    schema: SchemaDocument,
    config: GeneratorConfig,
    on_written: Callable[[Path], None] | None = None,
) -> list[Path]:
    """Render and write every collection in input order. Returns the written paths.

    Stops at the first write failure; files written before it stay on disk.
    Two collections whose names collapse to the same PascalCase identifier in
    the same database write to the same path and the later one wins.
    """
    written: list[Path] = []
    for collection in schema.collections:
        code = render_interface(collection, config)
        path = write_interface(collection, code, config)
        written.append(path)
        if on_written is not None:
            on_written(path)
    logger.info("Generated %d interfaces under %s", len(written), config.output_dir)
    return written
