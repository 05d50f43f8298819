"""Business Profile Domain Entity"""

from typing import Optional
from pydantic import Field, field_validator
from src.domain.base import BaseModel, coerce_text


class Business(BaseModel):
    """
    Business - Singleton "from" party shown on every invoice

    Exactly one profile exists per installation, stored without an id.
    """

    name: str = Field(default="", description="Business name")
    email: str = Field(default="", description="Contact email")
    phone: str = Field(default="", description="Contact phone")
    address: str = Field(default="", description="Postal address")

    currency: str = Field(
        default="USD",
        description="Currency code (ISO 4217) used when formatting amounts"
    )

    logo: Optional[str] = Field(default=None, description="Logo URI")
    tax_id: Optional[str] = Field(default=None, description="Tax registration number")

    @field_validator("name", "email", "phone", "address", mode="before")
    @classmethod
    def _coerce_text(cls, value):
        return coerce_text(value)

    @field_validator("currency", mode="before")
    @classmethod
    def _default_currency(cls, value):
        return (str(value).strip().upper() if value else "") or "USD"
