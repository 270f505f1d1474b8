"""Interface generation — type mapping, rendering, and file output."""

from appwrite_interfaces.generator.renderer import render_field, render_interface
from appwrite_interfaces.generator.typemap import (
    FALLBACK_TYPE,
    TYPE_MAP,
    array_suffix,
    resolve_type,
    to_pascal_case,
)
from appwrite_interfaces.generator.writer import (
    generate_interfaces,
    interface_path,
    write_interface,
)

__all__ = [
    "FALLBACK_TYPE",
    "TYPE_MAP",
    "array_suffix",
    "generate_interfaces",
    "interface_path",
    "render_field",
    "render_interface",
    "resolve_type",
    "to_pascal_case",
    "write_interface",
]
