import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional

from config import settings
from constants import LOGGER_NAME, ORDER_STATUSES, STATUS_DELIVERED, STATUS_PENDING
from data import ORDERS
from errors import ApiError, ConflictError, ValidationError
from ids import next_id
from repositories.memory_repository import InMemoryRepository
from schemas import Order
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

RESOURCE = "Order"
MUTABLE_FIELDS = ("deliverTo", "mobileNumber", "status", "dishes")
STATUS_MESSAGE = "Order must have a status of " + ", ".join(ORDER_STATUSES)


def dishes_are_valid(context: CheckContext) -> Optional[ApiError]:
    dishes = context.data.get("dishes")
    if isinstance(dishes, list) and dishes:
        return None
    return ValidationError("Order must include at least one dish")


def dish_quantities_are_valid(context: CheckContext) -> Optional[ApiError]:
    for index, dish in enumerate(context.data["dishes"]):
        quantity = dish.get("quantity") if isinstance(dish, dict) else None
        if not is_positive_int(quantity):
            return ValidationError(
                f"Dish {index} must have a quantity that is an integer greater than 0"
            )
    return None


def status_is_valid(context: CheckContext) -> Optional[ApiError]:
    if context.data.get("status") in ORDER_STATUSES:
        return None
    return ValidationError(STATUS_MESSAGE)


def status_is_valid_if_given(context: CheckContext) -> Optional[ApiError]:
    if context.data.get("status") is None:
        return None
    return status_is_valid(context)


def order_is_not_delivered(context: CheckContext) -> Optional[ApiError]:
    if context.record["status"] != STATUS_DELIVERED:
        return None
    return ConflictError("A delivered order cannot be changed")


def order_is_pending(context: CheckContext) -> Optional[ApiError]:
    if context.record["status"] == STATUS_PENDING:
        return None
    return ConflictError("An order cannot be deleted unless it is pending")


CREATE_CHECKS: List[Check] = [
    body_data_has(RESOURCE, "deliverTo", str),
    body_data_has(RESOURCE, "mobileNumber", str),
    body_data_has(RESOURCE, "dishes"),
    dishes_are_valid,
    dish_quantities_are_valid,
    status_is_valid_if_given,
]
READ_CHECKS: List[Check] = [record_exists(RESOURCE)]
UPDATE_CHECKS: List[Check] = [
    record_exists(RESOURCE),
    order_is_not_delivered,
    body_data_has(RESOURCE, "deliverTo", str),
    body_data_has(RESOURCE, "mobileNumber", str),
    body_data_has(RESOURCE, "status"),
    body_data_has(RESOURCE, "dishes"),
    body_id_matches_route(RESOURCE),
    dishes_are_valid,
    dish_quantities_are_valid,
    status_is_valid,
]
DELETE_CHECKS: List[Check] = [record_exists(RESOURCE), order_is_pending]


def _format_row(row: Dict[str, Any]) -> Order:
    return Order(
        id=row["id"],
        deliverTo=row["deliverTo"],
        mobileNumber=row["mobileNumber"],
        status=row["status"],
        dishes=row["dishes"],
    )


class OrdersService:
    """Order handlers over an injected repository.

    Each operation runs in a worker thread while holding the repository lock,
    so the lookup, the checks and the write see one consistent store.
    """

    def __init__(
        self,
        repository: InMemoryRepository,
        id_factory: Callable[[], str] = next_id,
    ) -> None:
        self.repository = repository
        self._id_factory = id_factory

    async def list_orders(self) -> List[Order]:
        rows = await asyncio.to_thread(self.repository.list_all)
        return [_format_row(row) for row in rows]

    async def create_order(self, data: Dict[str, Any]) -> Order:
        return _format_row(await asyncio.to_thread(self._create, data))

    async def read_order(self, order_id: str) -> Order:
        return _format_row(await asyncio.to_thread(self._read, order_id))

    async def update_order(self, order_id: str, data: Dict[str, Any]) -> Order:
        return _format_row(await asyncio.to_thread(self._update, order_id, data))

    async def delete_order(self, order_id: str) -> None:
        await asyncio.to_thread(self._delete, order_id)

    def _create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        run_checks(CREATE_CHECKS, CheckContext(data=data))
        with self.repository.lock:
            record = {
                "id": self._new_id(),
                "deliverTo": data["deliverTo"],
                "mobileNumber": data["mobileNumber"],
                "status": data.get("status") or STATUS_PENDING,
                "dishes": data["dishes"],
            }
            row = self.repository.add(record)
        logger.info("create_order order=%s dishes=%s", row["id"], len(row["dishes"]))
        return row

    def _read(self, order_id: str) -> Dict[str, Any]:
        record = self.repository.get(order_id)
        run_checks(READ_CHECKS, CheckContext(data={}, route_id=order_id, record=record))
        return record

    def _update(self, order_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        with self.repository.lock:
            record = self.repository.get(order_id)
            run_checks(
                UPDATE_CHECKS,
                CheckContext(data=data, route_id=order_id, record=record),
            )
            for field in MUTABLE_FIELDS:
                record[field] = data[field]
            row = self.repository.replace(record)
        logger.info("update_order order=%s status=%s", order_id, row["status"])
        return row

    def _delete(self, order_id: str) -> None:
        with self.repository.lock:
            record = self.repository.get(order_id)
            run_checks(DELETE_CHECKS, CheckContext(data={}, route_id=order_id, record=record))
            self.repository.remove(order_id)
        logger.info("delete_order order=%s", order_id)

    def _new_id(self) -> str:
        order_id = self._id_factory()
        while self.repository.get(order_id) is not None:
            order_id = self._id_factory()
        return order_id


orders_service = OrdersService(InMemoryRepository(ORDERS if settings.seed_data else []))
