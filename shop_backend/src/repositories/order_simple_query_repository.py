"""
Screen-specific order query: selects exactly the columns of `OrderSimpleQueryDto`.

Kept apart from `OrderRepository` so the entity repository does not depend on a
screen-specific shape.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.dto import AddressDto, CamelModel
from src.db.models import Delivery, Member, Order, OrderStatus


class OrderSimpleQueryDto(CamelModel):
    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: Optional[AddressDto] = None


class OrderSimpleQueryRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    # PUBLIC_INTERFACE
    def find_order_dtos(self) -> List[OrderSimpleQueryDto]:
        stmt = (
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
            .order_by(Order.id)
        )
        return [
            OrderSimpleQueryDto(
                order_id=row.order_id,
                name=row.name,
                order_date=row.order_date,
                order_status=row.order_status,
                address=AddressDto(city=row.city, street=row.street, zipcode=row.zipcode),
            )
            for row in self.db.execute(stmt)
        ]
