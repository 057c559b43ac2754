# product_api/domain/schemas.py
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ProductIn(BaseModel):
    """Request body for create and update. A client supplied ID is ignored."""

    name: str = Field(..., validation_alias=AliasChoices("Name", "name"))
    price: Decimal = Field(Decimal("0.00"), validation_alias=AliasChoices("Price", "price"))

    model_config = ConfigDict(extra="ignore")


class ProductOut(BaseModel):
    """Product as returned to clients: {"ID": 1, "Name": "...", "Price": 11.22}."""

    id: int = Field(..., validation_alias=AliasChoices("id", "ID"), serialization_alias="ID")
    name: str = Field(..., validation_alias=AliasChoices("name", "Name"), serialization_alias="Name")
    price: float = Field(..., validation_alias=AliasChoices("price", "Price"), serialization_alias="Price")

    model_config = ConfigDict(from_attributes=True)


class DeleteOut(BaseModel):
    result: str


class HealthOut(BaseModel):
    status: str
