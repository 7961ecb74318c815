from services.dishes_service import DishesService, dishes_service
from services.orders_service import OrdersService, orders_service


def get_orders_service() -> OrdersService:
    return orders_service


def get_dishes_service() -> DishesService:
    return dishes_service
