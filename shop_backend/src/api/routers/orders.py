"""
Order listings that include the order item collection, v2 through v6.

Recommended order when choosing a strategy:
1. Load entities, using fetch joins for ToOne relations.
   - Paging needed: IN-clause loading for collections (v3.1).
   - No paging: fetch join the collection too (v3).
2. Fall back to DTO queries (v4-v6) when entity loading is not enough.
3. Fall back to hand-written SQL last.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from src.api.schemas.common import IdResponse
from src.api.schemas.orders import (
    OrderDto,
    OrderEntity,
    PlaceOrderRequest,
    SimpleOrderDto,
)
from src.db.models import OrderStatus
from src.db.session import get_db
from src.repositories.order_query_repository import OrderQueryDto, OrderQueryRepository, group_flat_rows
from src.repositories.order_repository import OrderRepository, OrderSearch
from src.services import order_service

router = APIRouter(tags=["Orders"])


@router.get("/api/v2/orders", response_model=List[OrderDto], summary="Orders with items (lazy loading)")
def orders_v2(db: Session = Depends(get_db)) -> List[OrderDto]:
    """Every member, delivery, order item list and item is loaded by its own query."""
    orders = OrderRepository(db).find_all_by_search(OrderSearch())
    return [OrderDto.from_order(order) for order in orders]


@router.get("/api/v3/orders", response_model=List[OrderEntity], summary="Orders with items (fetch join)")
def orders_v3(db: Session = Depends(get_db)) -> List[OrderEntity]:
    """
    One query joining orders, members, deliveries, order items and items.

    Joining a collection repeats each order once per item; the repository collapses
    the duplicates. Only one collection can be fetch-joined and the result cannot be paged.
    """
    orders = OrderRepository(db).find_all_with_item()
    return [OrderEntity.model_validate(order) for order in orders]


@router.get("/api/v3.1/orders", response_model=List[OrderDto], summary="Orders with items (paged, IN loading)")
def orders_v3_page(
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=0),
    db: Session = Depends(get_db),
) -> List[OrderDto]:
    """
    Fetch join the ToOne relations, page on orders, then load order items and items
    with one IN query each.
    """
    orders = OrderRepository(db).find_all_with_member_delivery(offset, limit, with_items=True)
    return [OrderDto.from_order(order) for order in orders]


@router.get("/api/v4/orders", response_model=List[OrderQueryDto], summary="Orders via DTO queries")
def orders_v4(db: Session = Depends(get_db)) -> List[OrderQueryDto]:
    return OrderQueryRepository(db).find_order_query_dtos()


@router.get("/api/v5/orders", response_model=List[OrderQueryDto], summary="Orders via DTO queries (IN clause)")
def orders_v5(db: Session = Depends(get_db)) -> List[OrderQueryDto]:
    """Load the orders, then all of their items with one IN query and match them in memory."""
    return OrderQueryRepository(db).find_all_by_dto_optimization()


@router.get("/api/v6/orders", response_model=List[OrderQueryDto], summary="Orders via a flat join")
def orders_v6(db: Session = Depends(get_db)) -> List[OrderQueryDto]:
    """Fetch the full join as flat rows and rebuild the nesting in the application."""
    flats = OrderQueryRepository(db).find_all_by_dto_flat()
    return group_flat_rows(flats)


@router.get("/api/v1/orders", response_model=List[SimpleOrderDto], summary="Search orders")
def search_orders(
    member_name: Optional[str] = Query(default=None, alias="memberName"),
    order_status: Optional[OrderStatus] = Query(default=None, alias="orderStatus"),
    db: Session = Depends(get_db),
) -> List[SimpleOrderDto]:
    orders = order_service.find_orders(db, OrderSearch(member_name=member_name, order_status=order_status))
    return [SimpleOrderDto.from_order(order) for order in orders]


@router.post("/api/v1/orders", response_model=IdResponse, summary="Place order")
def place_order(request: PlaceOrderRequest, db: Session = Depends(get_db)) -> IdResponse:
    order_id = order_service.order(db, request.member_id, request.item_id, request.count)
    return IdResponse(id=order_id)


@router.post("/api/v1/orders/{order_id}/cancel", response_model=SimpleOrderDto, summary="Cancel order")
def cancel_order(order_id: int, db: Session = Depends(get_db)) -> SimpleOrderDto:
    order = order_service.cancel_order(db, order_id)
    return SimpleOrderDto.from_order(order)
