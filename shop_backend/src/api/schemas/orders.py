"""
Order payloads.

Two families live here:
- entity shapes (`*Entity`) that mirror the ORM objects one-to-one,
- DTOs built from loaded entities (`SimpleOrderDto`, `OrderDto`).

Query DTOs filled straight from selected columns sit next to their query repositories.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from src.api.schemas.members import MemberEntity
from src.core.dto import AddressDto, CamelModel
from src.db.models import Address, DeliveryStatus, Order, OrderItem, OrderStatus


def _address_dto(address: Optional[Address]) -> Optional[AddressDto]:
    if address is None:
        return None
    return AddressDto.model_validate(address)


# --- entity shapes ---------------------------------------------------------


class ItemEntity(CamelModel):
    """Item row as stored; only the fields of its own subtype are filled."""

    id: int
    name: str
    price: int
    stock_quantity: int

    author: Optional[str] = None
    isbn: Optional[str] = None
    artist: Optional[str] = None
    etc: Optional[str] = None
    director: Optional[str] = None
    actor: Optional[str] = None


class DeliveryEntity(CamelModel):
    id: int
    address: Optional[AddressDto] = None
    status: DeliveryStatus


class OrderItemEntity(CamelModel):
    id: int
    item: ItemEntity
    order_price: int
    count: int
    total_price: int


class SimpleOrderEntity(CamelModel):
    """Order with its ToOne relations only."""

    id: int
    member: MemberEntity
    delivery: DeliveryEntity
    order_date: datetime
    status: OrderStatus


class OrderEntity(SimpleOrderEntity):
    order_items: List[OrderItemEntity]
    total_price: int


# --- DTOs built from entities ----------------------------------------------


class SimpleOrderDto(CamelModel):
    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: Optional[AddressDto] = None

    @classmethod
    def from_order(cls, order: Order) -> "SimpleOrderDto":
        return cls(
            order_id=order.id,
            name=order.member.name,  # lazy load unless fetched
            order_date=order.order_date,
            order_status=order.status,
            address=_address_dto(order.delivery.address),  # lazy load unless fetched
        )


class OrderItemDto(CamelModel):
    item_name: str
    order_price: int
    count: int

    @classmethod
    def from_order_item(cls, order_item: OrderItem) -> "OrderItemDto":
        return cls(
            item_name=order_item.item.name,
            order_price=order_item.order_price,
            count=order_item.count,
        )


class OrderDto(SimpleOrderDto):
    order_items: List[OrderItemDto]

    @classmethod
    def from_order(cls, order: Order) -> "OrderDto":
        simple = SimpleOrderDto.from_order(order)
        return cls(
            **simple.model_dump(),
            order_items=[OrderItemDto.from_order_item(order_item) for order_item in order.order_items],
        )


# --- commands ----------------------------------------------------------------


class PlaceOrderRequest(CamelModel):
    member_id: int
    item_id: int
    count: int = Field(gt=0)
