import pytest

from src.core.errors import NotEnoughStockError, OrderCancelNotAllowedError
from src.db.models import Address, Book, Delivery, DeliveryStatus, Member, Order, OrderItem, OrderStatus


def _book(stock_quantity=10, price=1000):
    return Book(name="book", price=price, stock_quantity=stock_quantity)


def test_remove_stock_below_zero_raises_and_keeps_quantity():
    book = _book(stock_quantity=2)

    with pytest.raises(NotEnoughStockError):
        book.remove_stock(3)

    assert book.stock_quantity == 2


def test_order_item_create_takes_stock_and_prices_line():
    book = _book(stock_quantity=10, price=1500)

    order_item = OrderItem.create(book, order_price=book.price, count=4)

    assert book.stock_quantity == 6
    assert order_item.total_price == 6000


def test_order_create_and_cancel():
    first, second = _book(price=1000), _book(price=2000)
    order = Order.create(
        Member(name="m", address=Address("a", "b", "c")),
        Delivery(address=Address("a", "b", "c"), status=DeliveryStatus.READY),
        OrderItem.create(first, 1000, 1),
        OrderItem.create(second, 2000, 2),
    )

    assert order.status == OrderStatus.ORDER
    assert order.order_date is not None
    assert order.total_price == 5000

    order.cancel()

    assert order.status == OrderStatus.CANCEL
    assert (first.stock_quantity, second.stock_quantity) == (10, 10)


def test_cancel_after_delivery_completed_is_rejected():
    book = _book()
    order = Order.create(
        Member(name="m"),
        Delivery(status=DeliveryStatus.COMP),
        OrderItem.create(book, 1000, 1),
    )

    with pytest.raises(OrderCancelNotAllowedError):
        order.cancel()

    assert order.status == OrderStatus.ORDER
    assert book.stock_quantity == 9
