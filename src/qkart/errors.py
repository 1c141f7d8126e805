"""Tagged failures reported by the cart, catalogue and identity handlers.

Every guard failure carries a kind, an HTTP-style status code and a
human-readable message. The API layer turns these into responses; nothing
in the domain knows about HTTP beyond the status number.
"""

from enum import Enum
from http import HTTPStatus

import structlog

logger = structlog.get_logger(__name__)


class ErrorKind(Enum):
    NOT_FOUND = "NotFound"
    INVALID_REQUEST = "InvalidRequest"
    INTERNAL = "Internal"

    @property
    def status(self) -> int:
        return _STATUS_BY_KIND[self]


_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND.value,
    ErrorKind.INVALID_REQUEST: HTTPStatus.BAD_REQUEST.value,
    ErrorKind.INTERNAL: HTTPStatus.INTERNAL_SERVER_ERROR.value,
}

# Messages are part of the client contract and must not change.
CART_NOT_FOUND = "User does not have a cart"
CART_NOT_CREATED = "User does not have a cart. Use POST to create cart and add a product"
PRODUCT_ALREADY_IN_CART = "Product already in cart. Use the cart sidebar to update or remove product from cart"
PRODUCT_NOT_IN_DATABASE = "Product doesn't exist in database"
PRODUCT_NOT_IN_CART = "Product not in cart"
CART_IS_EMPTY = "User's cart doesn't have any product"
ADDRESS_NOT_SET = "User's address is not set"
INSUFFICIENT_BALANCE = "wallet balance is insufficient"
PRODUCT_NOT_FOUND = "Product not found"
USER_NOT_FOUND = "User not found"
EMAIL_TAKEN = "Email already taken"


class CartError(Exception):
    """A terminal, non-retryable failure tagged with its kind.

    Every QKart operation raises this type, including the catalogue and user
    operations the cart depends on, so the API has one error shape to map.
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status(self) -> int:
        return self.kind.status

    @classmethod
    def not_found(cls, message: str) -> "CartError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def invalid_request(cls, message: str) -> "CartError":
        return cls(ErrorKind.INVALID_REQUEST, message)

    @classmethod
    def internal(cls, message: str) -> "CartError":
        return cls(ErrorKind.INTERNAL, message)

    def to_dict(self) -> dict:
        return {"code": self.status, "message": self.message}

    def __repr__(self) -> str:
        return f"CartError(kind={self.kind.value}, status={self.status}, message={self.message!r})"


def rejected(error: CartError, **context) -> CartError:
    """Log a guard failure and hand the error back for raising."""
    logger.info("Request rejected", kind=error.kind.value, status=error.status, reason=error.message, **context)
    return error
