"""Renders one collection into the text of its TypeScript interface file."""

from __future__ import annotations

from appwrite_interfaces.config import GeneratorConfig
from appwrite_interfaces.generator.typemap import array_suffix, resolve_type, to_pascal_case
from appwrite_interfaces.schema.models import Attribute, Collection

GENERATOR_PACKAGE = "appwrite-interface-generator"
GENERATOR_COMMAND = "generate-appwrite-interfaces"
DOCUMENT_IMPORT = "import { Models } from 'appwrite';"
DOCUMENT_BASE = "Models.Document"


def render_interface(collection: Collection, config: GeneratorConfig) -> str:
    interface_name = to_pascal_case(collection.name)

    fields = [f"  {key}: {ts_type};" for key, ts_type in config.default_attributes.items()]
    # dict keys double as an insertion-ordered set
    related: dict[str, None] = {}
    for attr in collection.attributes:
        ts_type = resolve_type(attr, config.fallback_type)
        fields.append(render_field(attr, ts_type))
        if attr.is_relationship and attr.related_collection:
            related.setdefault(ts_type, None)

    imports = [
        f"import {{ {rel} }} from './{rel}';" for rel in related if rel != interface_name
    ]

    lines = _header_lines(config)
    if config.extends_document:
        lines.append(DOCUMENT_IMPORT)
    lines.extend(imports)
    lines.append("")
    lines.append(_declaration(interface_name, config))
    lines.extend(fields)
    lines.append("}")
    lines.append("")
    return "\n".join(lines)


def render_field(attr: Attribute, ts_type: str) -> str:
    optional = "" if attr.required else "?"
    return f"  {attr.key}{optional}: {ts_type}{array_suffix(attr)};"


def interface_filename(collection_name: str, config: GeneratorConfig) -> str:
    return f"{to_pascal_case(collection_name)}{config.extension}"


def _header_lines(config: GeneratorConfig) -> list[str]:
    return [
        f"// This file is auto-generated from Appwrite schema by the {GENERATOR_PACKAGE} package",
        "// Any changes you make here will be overwritten",
        f"// To regenerate, run: {GENERATOR_COMMAND} "
        f"--input={config.input_arg} --output={config.output_arg}",
    ]


def _declaration(interface_name: str, config: GeneratorConfig) -> str:
    if config.extends_document:
        return f"export interface {interface_name} extends {DOCUMENT_BASE} {{"
    return f"export interface {interface_name} {{"
