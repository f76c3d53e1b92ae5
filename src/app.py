"""EShop FastAPI application.

Web server that processes cart and order commands synchronously via HTTP.
Every request runs inside the eshop domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay is applied:
#   - "test"       → event_processing = "sync"  (projectors fire in UoW)
#   - "production" → event_processing = "async" (projectors fire via Engine)
from eshop.domain import eshop  # noqa: E402
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

eshop.init()

_DOMAIN_PREFIXES = ("/goods", "/carts", "/orders", "/buyers")

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="EShop API",
    description="Order management — catalog goods, carts, orders",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the Protean domain context for domain requests."""
    if request.url.path.startswith(_DOMAIN_PREFIXES):
        with eshop.domain_context():
            response = await call_next(request)
        return response
    # No domain match — pass through (health check, docs, etc.)
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from eshop.api import (  # noqa: E402
    buyer_router,
    cart_router,
    goods_router,
    install_error_handlers,
    order_router,
)

app.include_router(goods_router)
app.include_router(cart_router)
app.include_router(order_router)
app.include_router(buyer_router)
install_error_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "eshop": {"name": eshop.name},
            },
        }
    )
