"""Pydantic models for the parts of appwrite.json the generator reads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _SchemaModel(BaseModel):
    """Shared settings: Appwrite keys are camelCase and carry many unused fields."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class Attribute(_SchemaModel):
    """One attribute. Values of the wrong shape degrade instead of failing the load."""

    key: str
    type: str = ""
    required: bool = False
    array: bool = False
    relation_type: str | None = Field(default=None, alias="relationType")
    related_collection: str | None = Field(default=None, alias="relatedCollection")

    @field_validator("key", mode="before")
    @classmethod
    def stringify_key(cls, value: Any) -> Any:
        return value if isinstance(value, str) else str(value)

    @field_validator("type", mode="before")
    @classmethod
    def non_string_type_is_empty(cls, value: Any) -> Any:
        # unknown or malformed types render as the fallback type
        return value if isinstance(value, str) else ""

    @field_validator("required", "array", mode="before")
    @classmethod
    def truthy_flag(cls, value: Any) -> bool:
        return bool(value)

    @field_validator("relation_type", "related_collection", mode="before")
    @classmethod
    def non_string_reference_is_none(cls, value: Any) -> Any:
        return value if isinstance(value, str) else None

    @property
    def is_relationship(self) -> bool:
        return self.type == "relationship"


class Collection(_SchemaModel):
    """A collection as declared in appwrite.json."""

    database_id: str = Field(alias="databaseId")
    name: str
    attributes: list[Attribute] = Field(default_factory=list)


class SchemaDocument(_SchemaModel):
    """Top-level appwrite.json document. Only ``collections`` is consulted."""

    collections: list[Collection] = Field(default_factory=list)

    @field_validator("collections", mode="before")
    @classmethod
    def null_collections_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value
