"""
Order placement and cancellation.

Stock bookkeeping lives on the entities (`OrderItem.create`, `Order.cancel`); this
module only loads what they need and owns the transaction.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List

from sqlalchemy.orm import Session

from src.core.errors import OrderNotFoundError, ShopError
from src.core.observability import log_event
from src.db.models import Address, Delivery, DeliveryStatus, Order, OrderItem
from src.repositories.order_repository import OrderRepository, OrderSearch
from src.services import item_service, member_service


# PUBLIC_INTERFACE
def order(db: Session, member_id: int, item_id: int, count: int) -> int:
    """Place a one-item order for a member, shipped to the member's address."""
    member = member_service.find_one(db, member_id)
    item = item_service.find_one(db, item_id)

    try:
        order_item = OrderItem.create(item=item, order_price=item.price, count=count)
    except ShopError:
        db.rollback()
        raise

    address = replace(member.address) if member.address is not None else Address()
    delivery = Delivery(address=address, status=DeliveryStatus.READY)
    new_order = Order.create(member, delivery, order_item)

    OrderRepository(db).save(new_order)
    db.commit()
    log_event("order_placed", member_id=member_id, order_id=new_order.id)
    return new_order.id


def find_one(db: Session, order_id: int) -> Order:
    found = OrderRepository(db).find_one(order_id)
    if found is None:
        raise OrderNotFoundError(order_id)
    return found


# PUBLIC_INTERFACE
def cancel_order(db: Session, order_id: int) -> Order:
    """Cancel an order and return its items to stock."""
    target = find_one(db, order_id)
    try:
        target.cancel()
    except ShopError:
        db.rollback()
        raise

    db.commit()
    log_event("order_cancelled", member_id=target.member_id, order_id=order_id)
    return target


def find_orders(db: Session, search: OrderSearch) -> List[Order]:
    return OrderRepository(db).find_all_by_search(search)
