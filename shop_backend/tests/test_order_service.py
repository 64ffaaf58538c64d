import pytest

from src.core.errors import (
    DuplicateMemberError,
    ItemNotFoundError,
    MemberNotFoundError,
    NotEnoughStockError,
    OrderCancelNotAllowedError,
)
from src.db.models import Address, Book, DeliveryStatus, Member, OrderStatus
from src.repositories.order_repository import OrderSearch
from src.services import member_service, order_service


def _member(db_session, name="member1") -> Member:
    member = Member(name=name, address=Address("서울", "강가", "123-123"))
    member_service.join(db_session, member)
    return member


def _book(db_session, name="JPA BOOK", price=10000, stock_quantity=10) -> Book:
    book = Book(name=name, price=price, stock_quantity=stock_quantity)
    db_session.add(book)
    db_session.commit()
    return book


def test_order_places_order_and_removes_stock(db_session):
    member = _member(db_session)
    book = _book(db_session)

    order_id = order_service.order(db_session, member.id, book.id, 2)

    placed = order_service.find_one(db_session, order_id)
    assert placed.status == OrderStatus.ORDER
    assert len(placed.order_items) == 1
    assert placed.total_price == 10000 * 2
    assert placed.delivery.address == Address("서울", "강가", "123-123")
    assert placed.delivery.status == DeliveryStatus.READY
    assert book.stock_quantity == 8


def test_order_over_stock_fails_and_keeps_stock(db_session):
    member = _member(db_session)
    book = _book(db_session, stock_quantity=10)

    with pytest.raises(NotEnoughStockError):
        order_service.order(db_session, member.id, book.id, 11)

    db_session.expire_all()
    assert db_session.get(Book, book.id).stock_quantity == 10
    assert order_service.find_orders(db_session, OrderSearch()) == []


def test_order_requires_existing_member_and_item(db_session):
    member = _member(db_session)
    book = _book(db_session)

    with pytest.raises(MemberNotFoundError):
        order_service.order(db_session, 999, book.id, 1)
    with pytest.raises(ItemNotFoundError):
        order_service.order(db_session, member.id, 999, 1)


def test_cancel_order_restores_stock(db_session):
    member = _member(db_session)
    book = _book(db_session, stock_quantity=10)
    order_id = order_service.order(db_session, member.id, book.id, 2)

    cancelled = order_service.cancel_order(db_session, order_id)

    assert cancelled.status == OrderStatus.CANCEL
    assert book.stock_quantity == 10


def test_cancel_delivered_order_is_rejected(db_session):
    member = _member(db_session)
    book = _book(db_session)
    order_id = order_service.order(db_session, member.id, book.id, 1)
    placed = order_service.find_one(db_session, order_id)
    placed.delivery.status = DeliveryStatus.COMP
    db_session.commit()

    with pytest.raises(OrderCancelNotAllowedError):
        order_service.cancel_order(db_session, order_id)

    db_session.expire_all()
    assert order_service.find_one(db_session, order_id).status == OrderStatus.ORDER


def test_find_orders_filters_by_member_name_and_status(db_session):
    kim = _member(db_session, name="kim")
    lee = _member(db_session, name="lee")
    book = _book(db_session, stock_quantity=100)
    kim_order = order_service.order(db_session, kim.id, book.id, 1)
    lee_order = order_service.order(db_session, lee.id, book.id, 1)
    order_service.cancel_order(db_session, lee_order)

    by_name = order_service.find_orders(db_session, OrderSearch(member_name="ki"))
    cancelled = order_service.find_orders(db_session, OrderSearch(order_status=OrderStatus.CANCEL))
    everything = order_service.find_orders(db_session, OrderSearch())

    assert [order.id for order in by_name] == [kim_order]
    assert [order.id for order in cancelled] == [lee_order]
    assert [order.id for order in everything] == [kim_order, lee_order]


def test_join_rejects_duplicate_name(db_session):
    _member(db_session, name="dup")

    with pytest.raises(DuplicateMemberError) as exc:
        _member(db_session, name="dup")

    assert exc.value.code == "DUPLICATE_MEMBER"
    assert exc.value.status_code == 409
