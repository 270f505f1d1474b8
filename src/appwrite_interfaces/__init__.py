"""Appwrite interfaces — TypeScript interface generation from appwrite.json.

Reads the collections declared in an Appwrite project file and writes one
TypeScript interface per collection, grouped by database.

Public API::

    from appwrite_interfaces import GeneratorConfig
    from appwrite_interfaces.schema import load_schema
    from appwrite_interfaces.generator import generate_interfaces, render_interface
"""

from appwrite_interfaces.config import GeneratorConfig

__all__ = ["GeneratorConfig"]
__version__ = "0.1.0"
