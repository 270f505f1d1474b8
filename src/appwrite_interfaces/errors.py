"""Error types raised while loading schemas and writing interfaces."""

from __future__ import annotations


class InterfaceGeneratorError(Exception):
    """Base class for failures that abort a generation run."""


class SchemaLoadError(InterfaceGeneratorError):
    """The input schema file is missing, unreadable, or malformed."""


class InterfaceWriteError(InterfaceGeneratorError):
    """An output directory or interface file could not be written."""
