"""Data Transfer Objects for Directory Use Cases

Command inputs for clients, products and the business profile.
"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator


class SaveClientCommandDTO(BaseModel):
    """
    Command DTO for creating or updating a client

    Omitting id creates a new client.
    """

    id: Optional[str] = Field(default=None, description="Existing client id (omit to create)")
    name: str = Field(..., description="Client display name (required)")
    email: str = Field(default="", description="Contact email")
    phone: Optional[str] = Field(default=None, description="Contact phone")
    address: Optional[str] = Field(default=None, description="Postal address")
    company: Optional[str] = Field(default=None, description="Company name")
    notes: Optional[str] = Field(default=None, description="Internal notes")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject blank names"""
        if not v or not v.strip():
            raise ValueError("Client name is required")
        return v.strip()

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Acme Corp",
                "email": "billing@acme.example",
                "address": "1 Main St\nSpringfield",
            }
        }


class SaveProductCommandDTO(BaseModel):
    """Command DTO for creating or updating a catalog product"""

    id: Optional[str] = Field(default=None, description="Existing product id (omit to create)")
    name: str = Field(..., description="Product name")
    description: str = Field(default="", description="Product description")
    price: str = Field(default="0", description="Unit price as a decimal string")
    unit: Optional[str] = Field(default=None, description="Unit label (e.g., hour)")
    tax: Optional[str] = Field(default=None, description="Informational tax rate")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Product name is required")
        return v.strip()
