"""QKart FastAPI application.

Processes cart, catalogue and user commands synchronously via HTTP. Every
request runs inside the QKart domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from qkart/domain.toml.
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from qkart.domain import qkart

qkart.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="QKart API",
    description="E-commerce cart service: catalogue, users, carts and checkout",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Middleware and routers
# ---------------------------------------------------------------------------
from qkart.api import (  # noqa: E402
    cart_router,
    domain_context_middleware,
    install_error_handlers,
    product_router,
    user_router,
)

app.middleware("http")(domain_context_middleware)

app.include_router(product_router)
app.include_router(user_router)
app.include_router(cart_router)

install_error_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": qkart.name})
