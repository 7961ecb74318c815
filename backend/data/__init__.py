from .dishes_data import DISHES
from .orders_data import ORDERS

__all__ = ["DISHES", "ORDERS"]
