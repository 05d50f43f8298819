"""Product Domain Entity"""

from typing import Optional
from pydantic import Field, field_validator
from src.domain.base import BaseModel, generate_uuid, coerce_text


class Product(BaseModel):
    """
    Product - Catalog entry used to prefill invoice items

    Domain Rules:
    - price is a decimal string
    - Once copied into an invoice item there is no live link back
    """

    id: str = Field(
        default_factory=generate_uuid,
        description="Unique product identifier"
    )

    name: str = Field(
        ...,
        description="Product name"
    )

    description: str = Field(
        default="",
        description="Product description"
    )

    price: str = Field(
        default="0",
        description="Unit price as a decimal string"
    )

    unit: Optional[str] = Field(default=None, description="Unit label (e.g., hour)")
    tax: Optional[str] = Field(default=None, description="Informational tax rate")

    @field_validator("description", "price", mode="before")
    @classmethod
    def _coerce_text(cls, value):
        return coerce_text(value)
