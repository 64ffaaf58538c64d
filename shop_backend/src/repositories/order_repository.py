"""
Entity queries for orders.

Each finder picks its own loading strategy for the member, delivery and order item
relations; the mappings in `src.db.models` keep all of them lazy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload, selectinload

from src.db.models import Member, Order, OrderItem, OrderStatus

MAX_SEARCH_RESULTS = 1000


@dataclass
class OrderSearch:
    member_name: Optional[str] = None
    order_status: Optional[OrderStatus] = None


class OrderRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def save(self, order: Order) -> None:
        self.db.add(order)
        self.db.flush()

    def find_one(self, order_id: int) -> Optional[Order]:
        return self.db.get(Order, order_id)

    # PUBLIC_INTERFACE
    def find_all_by_search(self, search: OrderSearch) -> List[Order]:
        """
        Filter orders by status and member name (substring match).

        Only the orders table is loaded; member and delivery are fetched lazily,
        one query per order, when they are first touched.
        """
        stmt = select(Order).join(Order.member)
        if search.order_status is not None:
            stmt = stmt.where(Order.status == search.order_status)
        if search.member_name:
            stmt = stmt.where(Member.name.like(f"%{search.member_name}%"))
        stmt = stmt.order_by(Order.id).limit(MAX_SEARCH_RESULTS)
        return list(self.db.scalars(stmt))

    # PUBLIC_INTERFACE
    def find_all_with_member_delivery(
        self,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        *,
        with_items: bool = False,
    ) -> List[Order]:
        """
        Fetch-join the ToOne relations (member, delivery) into the orders query.

        ToOne joins do not multiply rows, so offset/limit stay correct. With
        `with_items`, order items and their items are loaded afterwards with one
        IN-clause query each instead of one query per order.
        """
        stmt = (
            select(Order)
            .options(joinedload(Order.member), joinedload(Order.delivery))
            .order_by(Order.id)
            .offset(offset)
            .limit(limit)
        )
        if with_items:
            stmt = stmt.options(selectinload(Order.order_items).selectinload(OrderItem.item))
        return list(self.db.scalars(stmt))

    # PUBLIC_INTERFACE
    def find_all_with_item(self) -> List[Order]:
        """
        Load orders with member, delivery, order items and items in a single statement.

        Joining the collection repeats each order once per order item, so duplicate
        roots are collapsed with `unique()`. This query cannot be paged.
        """
        stmt = (
            select(Order)
            .options(
                joinedload(Order.member),
                joinedload(Order.delivery),
                joinedload(Order.order_items).joinedload(OrderItem.item),
            )
            .order_by(Order.id)
        )
        return list(self.db.scalars(stmt).unique())
