"""
Demo dataset: two members, four books and one two-line order per member.

Run standalone with `python -m src.db.seed` from `shop_backend/`, or let the app
insert it on startup with `SHOP_SEED_DEMO_DATA=true`.
"""

from __future__ import annotations

from dataclasses import replace

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.observability import get_logger
from src.db.models import Address, Book, Delivery, DeliveryStatus, Member, Order, OrderItem

logger = get_logger("seed")

SAMPLE_ORDERS = [
    {
        "member": {"name": "userA", "address": ("서울", "1", "1111")},
        "books": [
            {"name": "JPA1 BOOK", "price": 10000, "stock_quantity": 100, "count": 1},
            {"name": "JPA2 BOOK", "price": 20000, "stock_quantity": 100, "count": 2},
        ],
    },
    {
        "member": {"name": "userB", "address": ("진주", "2", "2222")},
        "books": [
            {"name": "SPRING1 BOOK", "price": 20000, "stock_quantity": 200, "count": 3},
            {"name": "SPRING2 BOOK", "price": 40000, "stock_quantity": 300, "count": 4},
        ],
    },
]


def seed_demo_data(db: Session) -> int:
    """Insert the demo dataset unless members already exist. Returns the number of orders added."""
    if db.scalars(select(Member.id).limit(1)).first() is not None:
        logger.info("seed skipped: members already present")
        return 0

    added = 0
    for sample in SAMPLE_ORDERS:
        member = Member(name=sample["member"]["name"], address=Address(*sample["member"]["address"]))
        db.add(member)

        order_items = []
        for book_data in sample["books"]:
            book = Book(
                name=book_data["name"],
                price=book_data["price"],
                stock_quantity=book_data["stock_quantity"],
            )
            db.add(book)
            order_items.append(OrderItem.create(item=book, order_price=book.price, count=book_data["count"]))

        delivery = Delivery(address=replace(member.address), status=DeliveryStatus.READY)
        db.add(Order.create(member, delivery, *order_items))
        added += 1

    db.commit()
    logger.info("seed complete: added %d orders", added)
    return added


if __name__ == "__main__":
    from src.core.config import settings
    from src.core.observability import configure_logging
    from src.db.base import Base
    from src.db.session import SessionLocal, engine

    configure_logging(settings.log_level)
    Base.metadata.create_all(bind=engine)
    with SessionLocal() as session:
        seed_demo_data(session)
