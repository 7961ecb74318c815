import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional

from config import settings
from constants import LOGGER_NAME
from data import DISHES
from errors import ApiError, ValidationError
from ids import next_id
from repositories.memory_repository import InMemoryRepository
from schemas import Dish
from services.validation import (
    Check,
    CheckContext,
    body_data_has,
    body_id_matches_route,
    is_positive_int,
    record_exists,
    run_checks,
)

logger = logging.getLogger(LOGGER_NAME)

RESOURCE = "Dish"
MUTABLE_FIELDS = ("name", "description", "price", "image_url")


def price_is_valid(context: CheckContext) -> Optional[ApiError]:
    if is_positive_int(context.data.get("price")):
        return None
    return ValidationError("Dish must have a price that is an integer greater than 0")


FIELD_CHECKS: List[Check] = [
    body_data_has(RESOURCE, "name", str),
    body_data_has(RESOURCE, "description", str),
    body_data_has(RESOURCE, "price"),
    body_data_has(RESOURCE, "image_url", str),
    price_is_valid,
]
READ_CHECKS: List[Check] = [record_exists(RESOURCE)]
UPDATE_CHECKS: List[Check] = [
    record_exists(RESOURCE),
    *FIELD_CHECKS,
    body_id_matches_route(RESOURCE),
]


def _format_row(row: Dict[str, Any]) -> Dish:
    return Dish(
        id=row["id"],
        name=row["name"],
        description=row["description"],
        price=row["price"],
        image_url=row["image_url"],
    )


class DishesService:
    def __init__(
        self,
        repository: InMemoryRepository,
        id_factory: Callable[[], str] = next_id,
    ) -> None:
        self.repository = repository
        self._id_factory = id_factory

    async def list_dishes(self) -> List[Dish]:
        rows = await asyncio.to_thread(self.repository.list_all)
        return [_format_row(row) for row in rows]

    async def create_dish(self, data: Dict[str, Any]) -> Dish:
        return _format_row(await asyncio.to_thread(self._create, data))

    async def read_dish(self, dish_id: str) -> Dish:
        record = await asyncio.to_thread(self.repository.get, dish_id)
        run_checks(READ_CHECKS, CheckContext(data={}, route_id=dish_id, record=record))
        return _format_row(record)

    async def update_dish(self, dish_id: str, data: Dict[str, Any]) -> Dish:
        return _format_row(await asyncio.to_thread(self._update, dish_id, data))

    def _create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        run_checks(FIELD_CHECKS, CheckContext(data=data))
        with self.repository.lock:
            dish_id = self._id_factory()
            while self.repository.get(dish_id) is not None:
                dish_id = self._id_factory()
            record = {"id": dish_id}
            record.update({field: data[field] for field in MUTABLE_FIELDS})
            row = self.repository.add(record)
        logger.info("create_dish dish=%s name=%s", row["id"], row["name"])
        return row

    def _update(self, dish_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        with self.repository.lock:
            record = self.repository.get(dish_id)
            run_checks(UPDATE_CHECKS, CheckContext(data=data, route_id=dish_id, record=record))
            for field in MUTABLE_FIELDS:
                record[field] = data[field]
            row = self.repository.replace(record)
        logger.info("update_dish dish=%s", dish_id)
        return row


dishes_service = DishesService(InMemoryRepository(DISHES if settings.seed_data else []))
