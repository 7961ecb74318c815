from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Response, status

from api.dependencies import get_orders_service
from schemas import ErrorResponse, OrderListResponse, OrderResponse
from services.orders_service import OrdersService
from services.validation import request_data

router = APIRouter(
    prefix="/orders",
    tags=["orders"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)


@router.get("", response_model=OrderListResponse)
async def list_orders(
    service: OrdersService = Depends(get_orders_service),
) -> OrderListResponse:
    return OrderListResponse(data=await service.list_orders())


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: OrdersService = Depends(get_orders_service),
) -> OrderResponse:
    order = await service.create_order(request_data(payload))
    return OrderResponse(data=order)


@router.get("/{order_id}", response_model=OrderResponse)
async def read_order(
    order_id: str,
    service: OrdersService = Depends(get_orders_service),
) -> OrderResponse:
    return OrderResponse(data=await service.read_order(order_id))


@router.put("/{order_id}", response_model=OrderResponse)
async def update_order(
    order_id: str,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: OrdersService = Depends(get_orders_service),
) -> OrderResponse:
    order = await service.update_order(order_id, request_data(payload))
    return OrderResponse(data=order)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(
    order_id: str,
    service: OrdersService = Depends(get_orders_service),
) -> Response:
    await service.delete_order(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
