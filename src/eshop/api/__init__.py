"""EShop domain API package."""

from eshop.api.routes import buyer_router, cart_router, goods_router, install_error_handlers, order_router

__all__ = ["goods_router", "cart_router", "order_router", "buyer_router", "install_error_handlers"]
