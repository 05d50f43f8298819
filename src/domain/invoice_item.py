"""Invoice Item Domain Entity

One billable line within an invoice.
"""

from pydantic import Field, field_validator
from src.domain.base import BaseModel, generate_uuid, coerce_text


class InvoiceItem(BaseModel):
    """
    Invoice Item - Individual line within an invoice

    Domain Rules:
    - id is unique within its invoice only
    - quantity, price and amount are decimal strings
    - amount = round(quantity * price, 2), derived and never edited directly
    - Unparsable quantity or price count as 0
    """

    id: str = Field(
        default_factory=generate_uuid,
        description="Item identifier (unique within the invoice)"
    )

    description: str = Field(
        default="",
        description="Free text description of the billed work or goods"
    )

    quantity: str = Field(
        default="1",
        description="Quantity as a decimal string"
    )

    price: str = Field(
        default="0",
        description="Unit price as a decimal string"
    )

    amount: str = Field(
        default="0.00",
        description="Cached quantity * price, rounded to 2 decimal places"
    )

    @field_validator("description", "quantity", "price", "amount", mode="before")
    @classmethod
    def _coerce_text(cls, value):
        return coerce_text(value)
