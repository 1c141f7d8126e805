"""HTTP middleware shared by the QKart app and its test clients."""

from fastapi import Request

from qkart.domain import qkart
from qkart.utils.logging import add_context, clear_context


async def domain_context_middleware(request: Request, call_next):
    """Push the QKart domain context and bind request details to the log context."""
    add_context(method=request.method, path=request.url.path)
    try:
        with qkart.domain_context():
            return await call_next(request)
    finally:
        clear_context()
