"""FastAPI routes for the EShop domain — catalog goods, carts and orders."""

import structlog
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from eshop.api.schemas import (
    AddGoodRequest,
    CartGoodSchema,
    ErrorResponse,
    GoodIdResponse,
    OrderAdminViewResponse,
    OrderResponse,
    RegisterGoodRequest,
)
from eshop.errors import ShopError
from eshop.good.catalogue import RegisterGood
from eshop.order.cart import AddGoodToCart, RemoveGoodFromCart, current_cart
from eshop.order.lookup import DEFAULT_PAGE_SIZE, get_order, list_orders, order_history
from eshop.order.submission import SubmitOrder

logger = structlog.get_logger(__name__)

_NOT_FOUND = {404: {"model": ErrorResponse}}
_BAD_REQUEST = {400: {"model": ErrorResponse}}


# ---------------------------------------------------------------------------
# Error translation
# ---------------------------------------------------------------------------
async def shop_error_handler(request: Request, exc: ShopError) -> JSONResponse:
    logger.info("Request rejected", path=request.url.path, status_code=exc.status_code, info=exc.message)
    return JSONResponse(status_code=exc.status_code, content={"info": exc.message})


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    messages = exc.messages if isinstance(exc.messages, dict) else {"_entity": [str(exc.messages)]}
    first = next((errors[0] for errors in messages.values() if errors), "Invalid request")
    logger.info("Request failed validation", path=request.url.path, errors=messages)
    return JSONResponse(status_code=400, content={"info": first, "errors": messages})


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ShopError, shop_error_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)


# ---------------------------------------------------------------------------
# Goods Router
# ---------------------------------------------------------------------------
goods_router = APIRouter(prefix="/goods", tags=["goods"])


@goods_router.post("", status_code=201, response_model=GoodIdResponse, responses=_BAD_REQUEST)
async def register_good(body: RegisterGoodRequest) -> GoodIdResponse:
    command = RegisterGood(
        title=body.title,
        price=float(body.price),
        quantity=body.quantity,
        description=body.description,
    )
    result = current_domain.process(command, asynchronous=False)
    return GoodIdResponse(good_id=result)


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/carts", tags=["carts"])


@cart_router.get("/{buyer_id}", response_model=list[CartGoodSchema])
async def view_cart(buyer_id: str) -> list[CartGoodSchema]:
    return current_cart(buyer_id)


@cart_router.post("/{buyer_id}/goods", response_model=list[CartGoodSchema], responses=_NOT_FOUND)
async def add_good(buyer_id: str, body: AddGoodRequest) -> list[CartGoodSchema]:
    command = AddGoodToCart(
        buyer_id=buyer_id,
        title=body.title,
        price=float(body.price),
        quantity=body.quantity,
    )
    return current_domain.process(command, asynchronous=False)


@cart_router.delete("/{buyer_id}/goods", response_model=list[CartGoodSchema], responses=_NOT_FOUND)
async def remove_good(buyer_id: str, title: str, price: float) -> list[CartGoodSchema]:
    command = RemoveGoodFromCart(buyer_id=buyer_id, title=title, price=price)
    return current_domain.process(command, asynchronous=False)


@cart_router.post("/{buyer_id}/submit", status_code=201, response_model=OrderResponse, responses=_BAD_REQUEST)
async def submit_order(buyer_id: str) -> OrderResponse:
    command = SubmitOrder(buyer_id=buyer_id)
    return current_domain.process(command, asynchronous=False)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("", response_model=list[OrderAdminViewResponse], responses=_BAD_REQUEST)
async def list_all_orders(
    sort: str = "default",
    filter: str = "",  # noqa: A002
    page_size: int = DEFAULT_PAGE_SIZE,
    page_number: int = 1,
) -> list[OrderAdminViewResponse]:
    return list_orders(sort=sort, filter=filter, page_size=page_size, page_number=page_number)


@order_router.get("/{order_id}", response_model=OrderResponse, responses=_NOT_FOUND)
async def get_order_by_id(order_id: str) -> OrderResponse:
    return get_order(order_id)


# ---------------------------------------------------------------------------
# Buyer Router
# ---------------------------------------------------------------------------
buyer_router = APIRouter(prefix="/buyers", tags=["buyers"])


@buyer_router.get("/{buyer_id}/orders", response_model=list[OrderAdminViewResponse])
async def buyer_order_history(
    buyer_id: str,
    page_size: int = DEFAULT_PAGE_SIZE,
    page_number: int = 1,
) -> list[OrderAdminViewResponse]:
    return order_history(buyer_id, page_size=page_size, page_number=page_number)
