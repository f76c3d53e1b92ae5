"""Pydantic request/response schemas for the EShop API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class CartGoodSchema(BaseModel):
    id: str
    title: str
    price: float
    quantity: int
    description: str | None = None


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class RegisterGoodRequest(BaseModel):
    title: str
    price: Decimal = Field(ge=0)
    quantity: int = Field(ge=0, default=0)
    description: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Juice",
                    "price": 2,
                    "quantity": 10,
                    "description": "This is a juice",
                }
            ]
        }
    }


class AddGoodRequest(BaseModel):
    title: str
    price: Decimal = Field(ge=0)
    quantity: int = Field(ge=1, default=1)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Juice",
                    "price": 2,
                    "quantity": 1,
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class GoodIdResponse(BaseModel):
    good_id: str


class OrderResponse(BaseModel):
    id: str
    buyer_id: str
    status: str
    goods: list[CartGoodSchema]
    total_price: float
    description: str | None = None
    created_at: str | None = None
    submitted_at: str | None = None


class OrderAdminViewResponse(BaseModel):
    id: str
    buyer_id: str
    goods: list[CartGoodSchema] = []
    goods_count: int
    total_price: float
    description: str | None = None
    submitted_at: str | None = None


class ErrorResponse(BaseModel):
    info: str
