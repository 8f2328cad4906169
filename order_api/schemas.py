from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from .models import DeliveryStatus, OrderStatus


class AddressDto(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    # a member may have no address on file
    city: Optional[str] = None
    street: Optional[str] = None
    zipcode: Optional[str] = None


# API responses. Shaped for callers, not copied from the tables.

class SimpleOrderDto(BaseModel):
    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: AddressDto


class OrderItemDto(BaseModel):
    item_name: str
    order_price: int
    count: int


class OrderDto(SimpleOrderDto):
    order_items: List[OrderItemDto]


# Entity-shaped responses: the aggregate's own attributes, read straight off
# the ORM objects. Whatever changes in the tables changes here too.

class MemberEntity(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: Optional[AddressDto] = None


class DeliveryEntity(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    address: AddressDto
    status: DeliveryStatus


class ItemEntity(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: int
    stock_quantity: int


class OrderItemEntity(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    item: ItemEntity
    order_price: int
    count: int


class SimpleOrderEntity(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    member: MemberEntity
    delivery: DeliveryEntity
    order_date: datetime
    status: OrderStatus


class OrderEntity(SimpleOrderEntity):
    order_items: List[OrderItemEntity]
