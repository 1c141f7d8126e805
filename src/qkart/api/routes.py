"""FastAPI routes for QKart: products, users and carts."""

from fastapi import APIRouter, Response
from protean.utils.globals import current_domain

from qkart.api.schemas import (
    AddProductRequest,
    AddToCartRequest,
    CartItemResponse,
    CartResponse,
    ChangeProductCostRequest,
    ProductIdResponse,
    ProductResponse,
    RegisterUserRequest,
    SetAddressRequest,
    StatusResponse,
    UpdateCartItemRequest,
    UserIdResponse,
    UserResponse,
)
from qkart.cart.checkout import Checkout
from qkart.cart.items import RemoveCartItem, UpdateCartItem, add_item_to_cart
from qkart.cart.retrieval import get_cart
from qkart.catalogue.management import AddProduct, ChangeProductCost, get_product
from qkart.identity.registration import RegisterUser, SetAddress, get_user


def _product_response(product) -> ProductResponse:
    return ProductResponse(
        id=str(product.id),
        name=product.name,
        category=product.category,
        cost=product.cost,
        rating=product.rating,
        image=product.image,
    )


def _cart_response(cart) -> CartResponse:
    items = [
        CartItemResponse(
            product=ProductResponse(
                id=item.product.product_id,
                name=item.product.name,
                category=item.product.category,
                cost=item.product.cost,
                rating=item.product.rating,
                image=item.product.image,
            ),
            quantity=item.quantity,
        )
        for item in cart.items
    ]
    return CartResponse(
        email=cart.email,
        payment_option=cart.payment_option,
        items=items,
        total_cost=cart.total_cost(),
    )


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def add_product(body: AddProductRequest) -> ProductIdResponse:
    command = AddProduct(
        name=body.name,
        category=body.category,
        cost=body.cost,
        rating=body.rating,
        image=body.image,
    )
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.get("/{product_id}", response_model=ProductResponse)
async def fetch_product(product_id: str) -> ProductResponse:
    return _product_response(get_product(product_id))


@product_router.put("/{product_id}/cost", response_model=StatusResponse)
async def change_product_cost(product_id: str, body: ChangeProductCostRequest) -> StatusResponse:
    current_domain.process(ChangeProductCost(product_id=product_id, cost=body.cost), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# User Router
# ---------------------------------------------------------------------------
user_router = APIRouter(prefix="/users", tags=["users"])


@user_router.post("", status_code=201, response_model=UserIdResponse)
async def register_user(body: RegisterUserRequest) -> UserIdResponse:
    result = current_domain.process(RegisterUser(email=body.email, name=body.name), asynchronous=False)
    return UserIdResponse(user_id=result)


@user_router.get("/{email}", response_model=UserResponse)
async def fetch_user(email: str) -> UserResponse:
    user = get_user(email)
    return UserResponse(
        id=str(user.id),
        email=user.email,
        name=user.name,
        wallet_money=user.wallet_money,
        address=user.address,
    )


@user_router.put("/{email}/address", response_model=StatusResponse)
async def set_address(email: str, body: SetAddressRequest) -> StatusResponse:
    current_domain.process(SetAddress(email=email, address=body.address), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/carts", tags=["carts"])


@cart_router.get("/{email}", response_model=CartResponse)
async def fetch_cart(email: str) -> CartResponse:
    return _cart_response(get_cart(email))


@cart_router.post("/{email}/items", response_model=CartResponse)
async def add_cart_item(email: str, body: AddToCartRequest) -> CartResponse:
    cart = add_item_to_cart(email, body.product_id, body.quantity)
    return _cart_response(cart)


@cart_router.put("/{email}/items/{product_id}", response_model=CartResponse)
async def update_cart_item(email: str, product_id: str, body: UpdateCartItemRequest) -> CartResponse:
    command = UpdateCartItem(
        email=email,
        product_id=product_id,
        quantity=body.quantity,
    )
    cart = current_domain.process(command, asynchronous=False)
    return _cart_response(cart)


@cart_router.delete("/{email}/items/{product_id}", status_code=204)
async def remove_cart_item(email: str, product_id: str) -> Response:
    current_domain.process(RemoveCartItem(email=email, product_id=product_id), asynchronous=False)
    return Response(status_code=204)


@cart_router.post("/{email}/checkout", status_code=204)
async def checkout_cart(email: str) -> Response:
    current_domain.process(Checkout(email=email), asynchronous=False)
    return Response(status_code=204)
