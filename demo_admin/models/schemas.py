from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    model_config = ConfigDict(frozen=True, json_schema_extra={"description": "A product in the catalog"})

    id: int | None = Field(default=None, description="Unique product identifier", examples=[1])
    name: str | None = Field(default=None, description="Product name", examples=["Laptop"])
    description: str | None = Field(
        default=None, description="Product description", examples=["High-performance laptop"]
    )
    # Exact decimal; JSON responses carry its digits as a string, e.g. "999.99".
    price: Decimal | None = Field(default=None, description="Unit price", examples=["999.99"])
    quantity: int | None = Field(default=None, description="Units in stock", examples=[50])


class User(BaseModel):
    model_config = ConfigDict(frozen=True, json_schema_extra={"description": "A registered user"})

    id: int | None = Field(default=None, description="Unique user identifier", examples=[1])
    name: str | None = Field(default=None, description="Full name", examples=["John Doe"])
    email: str | None = Field(default=None, description="Email address", examples=["john.doe@example.com"])
    age: int | None = Field(default=None, description="Age in years", examples=[25])


class HealthResponse(BaseModel):
    status: str
