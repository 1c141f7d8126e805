"""Pydantic request/response schemas for the QKart API.

These are external contracts, separate from internal Protean commands.
Field constraints here are the request validation layer.
"""

from pydantic import BaseModel, EmailStr, Field


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------
class AddProductRequest(BaseModel):
    name: str
    category: str | None = None
    cost: float = Field(ge=0)
    rating: float | None = Field(default=None, ge=0, le=5)
    image: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "UNIFACTOR Mens Running Shoes",
                    "category": "Fashion",
                    "cost": 50,
                    "rating": 5,
                    "image": "https://crio-directus-assets.s3.ap-south-1.amazonaws.com/42d4d057.png",
                }
            ]
        }
    }


class ChangeProductCostRequest(BaseModel):
    cost: float = Field(ge=0)


class ProductResponse(BaseModel):
    id: str
    name: str
    category: str | None = None
    cost: float
    rating: float | None = None
    image: str | None = None


class ProductIdResponse(BaseModel):
    product_id: str


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------
class RegisterUserRequest(BaseModel):
    email: EmailStr
    name: str = Field(min_length=1)


class SetAddressRequest(BaseModel):
    address: str = Field(min_length=1, max_length=500)


class UserResponse(BaseModel):
    id: str
    email: str
    name: str
    wallet_money: float
    address: str | None = None


class UserIdResponse(BaseModel):
    user_id: str


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = Field(ge=1)


class UpdateCartItemRequest(BaseModel):
    quantity: int = Field(ge=1)


class CartItemResponse(BaseModel):
    product: ProductResponse
    quantity: int


class CartResponse(BaseModel):
    email: str
    payment_option: str | None = None
    items: list[CartItemResponse]
    total_cost: float


class StatusResponse(BaseModel):
    status: str = "ok"
