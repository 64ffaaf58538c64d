"""
Order listings that only follow ToOne relations (Order -> Member, Order -> Delivery).
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.api.schemas.orders import SimpleOrderDto, SimpleOrderEntity
from src.db.session import get_db
from src.repositories.order_repository import OrderRepository, OrderSearch
from src.repositories.order_simple_query_repository import OrderSimpleQueryDto, OrderSimpleQueryRepository

router = APIRouter(tags=["Simple orders"])


@router.get("/api/v1/simple-orders", response_model=List[SimpleOrderEntity], summary="Orders as entities")
def orders_v1(db: Session = Depends(get_db)) -> List[SimpleOrderEntity]:
    """Serialize order entities as they are; member and delivery load lazily per order."""
    orders = OrderRepository(db).find_all_by_search(OrderSearch())
    return [SimpleOrderEntity.model_validate(order) for order in orders]


@router.get("/api/v2/simple-orders", response_model=List[SimpleOrderDto], summary="Orders as DTOs (N+1)")
def orders_v2(db: Session = Depends(get_db)) -> List[SimpleOrderDto]:
    """
    Map entities to DTOs without any fetch hints.

    One query for the orders, then one for each member and each delivery touched.
    """
    orders = OrderRepository(db).find_all_by_search(OrderSearch())
    return [SimpleOrderDto.from_order(order) for order in orders]


@router.get("/api/v3/simple-orders", response_model=List[SimpleOrderDto], summary="Orders as DTOs (fetch join)")
def orders_v3(db: Session = Depends(get_db)) -> List[SimpleOrderDto]:
    """Same response as v2, loaded with a single fetch-join query."""
    orders = OrderRepository(db).find_all_with_member_delivery()
    return [SimpleOrderDto.from_order(order) for order in orders]


@router.get("/api/v4/simple-orders", response_model=List[OrderSimpleQueryDto], summary="Orders via DTO query")
def orders_v4(db: Session = Depends(get_db)) -> List[OrderSimpleQueryDto]:
    """
    Select only the response columns.

    Slightly less data on the wire than v3, at the cost of a repository method that
    only fits this screen.
    """
    return OrderSimpleQueryRepository(db).find_order_dtos()
