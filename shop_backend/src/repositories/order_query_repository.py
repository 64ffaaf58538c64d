"""
Direct DTO queries for orders together with their order items.

Three variants, from the most queries to the fewest:
- `find_order_query_dtos`: one query for the orders, then one per order for its items.
- `find_all_by_dto_optimization`: one query for the orders, one IN query for all items.
- `find_all_by_dto_flat`: a single join; `group_flat_rows` rebuilds the nesting.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence

from pydantic import Field
from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from src.core.dto import AddressDto, CamelModel
from src.db.models import Delivery, Item, Member, Order, OrderItem, OrderStatus


class OrderItemQueryDto(CamelModel):
    # Only used to regroup items under their order; not part of the response body.
    order_id: Optional[int] = Field(default=None, exclude=True)
    item_name: str
    order_price: int
    count: int


class OrderQueryDto(CamelModel):
    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: Optional[AddressDto] = None
    order_items: List[OrderItemQueryDto] = Field(default_factory=list)


class OrderFlatDto(CamelModel):
    """One row of the orders x order_items join."""

    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: Optional[AddressDto] = None

    item_name: str
    order_price: int
    count: int


def _order_columns() -> Select:
    return (
        select(
            Order.id.label("order_id"),
            Member.name.label("name"),
            Order.order_date,
            Order.status.label("order_status"),
            Delivery.city,
            Delivery.street,
            Delivery.zipcode,
        )
        .join(Order.member)
        .join(Order.delivery)
    )


def _address(row) -> AddressDto:
    return AddressDto(city=row.city, street=row.street, zipcode=row.zipcode)


# PUBLIC_INTERFACE
def group_flat_rows(flats: Iterable[OrderFlatDto]) -> List[OrderQueryDto]:
    """
    Regroup one-row-per-item results into orders with nested item lists.

    Rows are grouped by order id; orders come out in the order they first appear.
    """
    grouped: Dict[int, OrderQueryDto] = {}
    for flat in flats:
        order = grouped.get(flat.order_id)
        if order is None:
            order = OrderQueryDto(
                order_id=flat.order_id,
                name=flat.name,
                order_date=flat.order_date,
                order_status=flat.order_status,
                address=flat.address,
            )
            grouped[flat.order_id] = order
        order.order_items.append(
            OrderItemQueryDto(
                order_id=flat.order_id,
                item_name=flat.item_name,
                order_price=flat.order_price,
                count=flat.count,
            )
        )
    return list(grouped.values())


class OrderQueryRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    # PUBLIC_INTERFACE
    def find_order_query_dtos(self) -> List[OrderQueryDto]:
        result = self._find_orders()
        for order in result:
            order.order_items = self._find_order_items(order.order_id)
        return result

    # PUBLIC_INTERFACE
    def find_all_by_dto_optimization(self) -> List[OrderQueryDto]:
        result = self._find_orders()
        order_item_map = self._find_order_item_map([order.order_id for order in result])
        for order in result:
            order.order_items = order_item_map.get(order.order_id, [])
        return result

    # PUBLIC_INTERFACE
    def find_all_by_dto_flat(self) -> List[OrderFlatDto]:
        stmt = (
            _order_columns()
            .add_columns(
                Item.name.label("item_name"),
                OrderItem.order_price,
                OrderItem.count.label("item_count"),
            )
            .join(Order.order_items)
            .join(OrderItem.item)
            .order_by(Order.id, OrderItem.id)
        )
        return [
            OrderFlatDto(
                order_id=row.order_id,
                name=row.name,
                order_date=row.order_date,
                order_status=row.order_status,
                address=_address(row),
                item_name=row.item_name,
                order_price=row.order_price,
                count=row.item_count,
            )
            for row in self.db.execute(stmt)
        ]

    def _find_orders(self) -> List[OrderQueryDto]:
        stmt = _order_columns().order_by(Order.id)
        return [
            OrderQueryDto(
                order_id=row.order_id,
                name=row.name,
                order_date=row.order_date,
                order_status=row.order_status,
                address=_address(row),
            )
            for row in self.db.execute(stmt)
        ]

    def _find_order_items(self, order_id: int) -> List[OrderItemQueryDto]:
        stmt = self._order_item_columns().where(OrderItem.order_id == order_id)
        return [self._to_order_item(row) for row in self.db.execute(stmt)]

    def _find_order_item_map(self, order_ids: Sequence[int]) -> Dict[int, List[OrderItemQueryDto]]:
        order_item_map: Dict[int, List[OrderItemQueryDto]] = defaultdict(list)
        if not order_ids:
            return order_item_map

        stmt = self._order_item_columns().where(OrderItem.order_id.in_(order_ids))
        for row in self.db.execute(stmt):
            order_item_map[row.order_id].append(self._to_order_item(row))
        return order_item_map

    @staticmethod
    def _order_item_columns() -> Select:
        return (
            select(
                OrderItem.order_id,
                Item.name.label("item_name"),
                OrderItem.order_price,
                OrderItem.count.label("item_count"),
            )
            .join(OrderItem.item)
            .order_by(OrderItem.id)
        )

    @staticmethod
    def _to_order_item(row) -> OrderItemQueryDto:
        return OrderItemQueryDto(
            order_id=row.order_id,
            item_name=row.item_name,
            order_price=row.order_price,
            count=row.item_count,
        )
