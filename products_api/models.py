"""
Product entity and the request/response schemas built around it.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from pydantic import BaseModel, Field, StrictStr, field_serializer, field_validator

TWO_PLACES = Decimal("0.01")


def to_price(value) -> Decimal:
    """Quantize a price to the two decimal places the store keeps."""
    try:
        return Decimal(str(value)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f"Invalid price: {value!r}") from None


class Product(BaseModel):
    """A row of the products table."""
    id: int
    name: str
    price: Decimal = Decimal("0.00")

    @field_validator("price", mode="before")
    @classmethod
    def _quantize_price(cls, value):
        return to_price(value)

    @field_serializer("price")
    def _price_as_number(self, price: Decimal) -> float:
        return float(price)

    @classmethod
    def from_row(cls, row) -> "Product":
        """Build a product from an (id, name, price) row."""
        return cls(id=row[0], name=row[1], price=row[2])


class ProductPayload(BaseModel):
    """
    Schema for the create and update request bodies.
    An "id" sent by the client is ignored; the store owns it.
    """
    name: StrictStr
    price: Decimal = Field(default=Decimal("0.00"), allow_inf_nan=False)

    @field_validator("price", mode="before")
    @classmethod
    def _quantize_price(cls, value):
        return to_price(value)

    def to_params(self) -> tuple:
        """Bound parameters in (name, price) column order."""
        return (self.name, str(self.price))


class ErrorResponse(BaseModel):
    """Schema for error bodies."""
    error: str


class ResultResponse(BaseModel):
    """Schema for bodies that only report an outcome."""
    result: str
