"""QKart API package."""

from qkart.api.errors import install_error_handlers
from qkart.api.middleware import domain_context_middleware
from qkart.api.routes import cart_router, product_router, user_router

__all__ = [
    "cart_router",
    "domain_context_middleware",
    "install_error_handlers",
    "product_router",
    "user_router",
]
