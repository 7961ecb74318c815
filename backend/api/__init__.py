from .dishes import router as dishes_router
from .orders import router as orders_router

__all__ = [
    "dishes_router",
    "orders_router",
]
