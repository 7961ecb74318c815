import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_dishes_service, get_orders_service
from data import DISHES, ORDERS
from main import app
from repositories.memory_repository import InMemoryRepository
from services.dishes_service import DishesService
from services.orders_service import OrdersService

DISH_ID = "d351db2b49b69679504652ea1cf38241"


@pytest.fixture
def orders_service() -> OrdersService:
    return OrdersService(InMemoryRepository(ORDERS))


@pytest.fixture
def dishes_service() -> DishesService:
    return DishesService(InMemoryRepository(DISHES))


@pytest.fixture
def client(orders_service, dishes_service):
    app.dependency_overrides[get_orders_service] = lambda: orders_service
    app.dependency_overrides[get_dishes_service] = lambda: dishes_service
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def dish() -> dict:
    return {
        "id": DISH_ID,
        "name": "Dolcelatte and chickpea spaghetti",
        "description": "Spaghetti topped with a blend of dolcelatte and fresh chickpeas",
        "image_url": "https://images.pexels.com/photos/1279330/pexels-photo-1279330.jpeg?h=530&w=350",
        "price": 19,
        "quantity": 2,
    }


@pytest.fixture
def order_data(dish) -> dict:
    return {
        "deliverTo": "Rick Sanchez (C-132)",
        "mobileNumber": "(202) 456-1111",
        "status": "pending",
        "dishes": [dish],
    }
