from typing import Any, Dict, List

from pydantic import BaseModel, Field


class Order(BaseModel):
    id: str
    deliverTo: str
    mobileNumber: str
    status: str
    dishes: List[Dict[str, Any]] = Field(
        ..., description="Dishes as sent by the client, each with a quantity"
    )


class OrderResponse(BaseModel):
    data: Order


class OrderListResponse(BaseModel):
    data: List[Order]


class Dish(BaseModel):
    id: str
    name: str
    description: str
    price: int
    image_url: str


class DishResponse(BaseModel):
    data: Dish


class DishListResponse(BaseModel):
    data: List[Dish]


class ErrorResponse(BaseModel):
    error: str
