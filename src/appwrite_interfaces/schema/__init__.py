from appwrite_interfaces.schema.loader import load_schema, parse_schema_text
from appwrite_interfaces.schema.models import Attribute, Collection, SchemaDocument

__all__ = [
    "Attribute",
    "Collection",
    "SchemaDocument",
    "load_schema",
    "parse_schema_text",
]
