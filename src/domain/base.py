"""Domain base model

Shared pydantic configuration for all persisted entities.
"""

import uuid
from typing import Any, Dict
from pydantic import BaseModel as PydanticBaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def generate_uuid() -> str:
    """Generate a new opaque entity identifier"""
    return str(uuid.uuid4())


def coerce_text(value: Any) -> Any:
    """Coerce legacy numeric/null values to the string form used on disk"""
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class BaseModel(PydanticBaseModel):
    """
    Base model for persisted entities

    Attributes are snake_case in Python and camelCase in the stored JSON.
    Unknown stored fields are kept so that a load/save round-trip never
    drops data written by other versions.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_record(self) -> Dict[str, Any]:
        """Serialize to the persisted JSON record (camelCase keys)"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_record(cls, record: Dict[str, Any]):
        """Build an entity from a persisted JSON record"""
        return cls.model_validate(record)
