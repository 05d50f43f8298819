"""Client Domain Entity"""

from typing import Optional
from pydantic import Field
from src.domain.base import BaseModel, generate_uuid


class Client(BaseModel):
    """
    Client - Billed party

    Domain Rules:
    - name is required
    - Invoices keep their own snapshot of name/address/email,
      deleting a client never cascades to invoices
    """

    id: str = Field(
        default_factory=generate_uuid,
        description="Unique client identifier"
    )

    name: str = Field(
        ...,
        description="Client display name"
    )

    email: str = Field(
        default="",
        description="Contact email"
    )

    phone: Optional[str] = Field(default=None, description="Contact phone")
    address: Optional[str] = Field(default=None, description="Postal address")
    company: Optional[str] = Field(default=None, description="Company name")
    notes: Optional[str] = Field(default=None, description="Internal notes")
