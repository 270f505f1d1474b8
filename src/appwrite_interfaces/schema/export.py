"""Export the JSON Schema of the appwrite.json subset the generator reads.

Run with ``python -m appwrite_interfaces.schema.export --output=FILE``. Keys
appear under their appwrite.json names (``databaseId``, ``relatedCollection``,
``relationType``) so the result can back editor validation of the input.
"""

from __future__ import annotations

import argparse
import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from appwrite_interfaces.schema.models import SchemaDocument

DEFAULT_OUTPUT = Path("docs/appwrite-interfaces.schema.json")


def input_json_schema() -> dict[str, Any]:
    schema = SchemaDocument.model_json_schema(by_alias=True, mode="validation")
    schema["title"] = "appwrite.json (collections)"
    return schema


def write_input_json_schema(output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(input_json_schema(), indent=2, sort_keys=True) + "\n", encoding="utf-8"
    )
    return output_path


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="python -m appwrite_interfaces.schema.export",
        description="Write the JSON Schema of the generator's input document.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"Path to write the schema (default: {DEFAULT_OUTPUT})",
    )
    args = parser.parse_args(argv)
    path = write_input_json_schema(args.output)
    print(f"Wrote input schema to {path}")


if __name__ == "__main__":
    main()
