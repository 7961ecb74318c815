from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, status

from api.dependencies import get_dishes_service
from schemas import DishListResponse, DishResponse, ErrorResponse
from services.dishes_service import DishesService
from services.validation import request_data

router = APIRouter(
    prefix="/dishes",
    tags=["dishes"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)


@router.get("", response_model=DishListResponse)
async def list_dishes(
    service: DishesService = Depends(get_dishes_service),
) -> DishListResponse:
    return DishListResponse(data=await service.list_dishes())


@router.post("", response_model=DishResponse, status_code=status.HTTP_201_CREATED)
async def create_dish(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: DishesService = Depends(get_dishes_service),
) -> DishResponse:
    return DishResponse(data=await service.create_dish(request_data(payload)))


@router.get("/{dish_id}", response_model=DishResponse)
async def read_dish(
    dish_id: str,
    service: DishesService = Depends(get_dishes_service),
) -> DishResponse:
    return DishResponse(data=await service.read_dish(dish_id))


@router.put("/{dish_id}", response_model=DishResponse)
async def update_dish(
    dish_id: str,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: DishesService = Depends(get_dishes_service),
) -> DishResponse:
    return DishResponse(data=await service.update_dish(dish_id, request_data(payload)))
