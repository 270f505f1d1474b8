"""Test fixtures for appwrite_interfaces tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from appwrite_interfaces import GeneratorConfig
from appwrite_interfaces.schema.models import Attribute, Collection


def make_test_attribute(key: str = "title", type: str = "string", **fields: Any) -> Attribute:
    """Create an attribute from appwrite.json-style (camelCase) keys."""
    return Attribute.model_validate({"key": key, "type": type, **fields})


def make_test_collection(
    name: str = "users",
    database_id: str = "main",
    attributes: list[Attribute] | None = None,
) -> Collection:
    """Create a minimal collection for testing."""
    return Collection(
        databaseId=database_id,
        name=name,
        attributes=attributes or [],
    )


def make_test_config(
    output_dir: Path | None = None,
    variant: str = "document",
    input_arg: str = "appwrite.json",
    output_arg: str = "src/interfaces",
) -> GeneratorConfig:
    """Create a GeneratorConfig; paths resolve under ``output_dir`` when given."""
    cwd = output_dir if output_dir is not None else Path("/project")
    return GeneratorConfig.from_args(input_arg, output_arg, cwd=cwd, variant=variant)


def write_schema(path: Path, collections: list[dict[str, Any]]) -> Path:
    path.write_text(json.dumps({"projectId": "demo", "collections": collections}), encoding="utf-8")
    return path


@pytest.fixture()
def appwrite_collections() -> list[dict[str, Any]]:
    return [
        {
            "$id": "users",
            "databaseId": "main",
            "name": "users",
            "enabled": True,
            "attributes": [
                {"key": "email", "type": "email", "required": True, "array": False, "size": 255},
                {"key": "nick_names", "type": "string", "required": False, "array": True},
                {
                    "key": "posts",
                    "type": "relationship",
                    "required": False,
                    "relatedCollection": "blog_posts",
                    "relationType": "oneToMany",
                    "twoWay": True,
                },
            ],
            "indexes": [],
        },
        {
            "$id": "blog_posts",
            "databaseId": "main",
            "name": "blog_posts",
            "attributes": [
                {"key": "title", "type": "string", "required": True},
                {
                    "key": "author",
                    "type": "relationship",
                    "relatedCollection": "users",
                    "relationType": "manyToOne",
                },
            ],
        },
        {
            "$id": "audit",
            "databaseId": "logs",
            "name": "audit-entries",
            "attributes": [],
        },
    ]
