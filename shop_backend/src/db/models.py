"""
SQLAlchemy ORM models for the shop schema.

Important:
- Every relationship is lazy ("select") by default. How related rows are fetched is
  decided per query in the repositories (plain lazy loading, fetch joins or IN-clause
  loading), never here.
- `Address` is a value object embedded into `member` and `delivery` as three columns.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, composite, mapped_column, relationship

from src.core.errors import NotEnoughStockError, OrderAlreadyCancelledError, OrderCancelNotAllowedError
from src.db.base import Base


class OrderStatus(str, enum.Enum):
    ORDER = "ORDER"
    CANCEL = "CANCEL"


class DeliveryStatus(str, enum.Enum):
    READY = "READY"
    COMP = "COMP"


@dataclass
class Address:
    """Embedded address value (city, street, zipcode)."""

    city: Optional[str] = None
    street: Optional[str] = None
    zipcode: Optional[str] = None


class Member(Base):
    """member table."""

    __tablename__ = "member"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    city: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    street: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    zipcode: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    address: Mapped[Address] = composite(Address, "city", "street", "zipcode")

    orders: Mapped[List["Order"]] = relationship("Order", back_populates="member")


class Item(Base):
    """item table; Book, Album and Movie share it through the `dtype` discriminator."""

    __tablename__ = "item"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    dtype: Mapped[str] = mapped_column(String(31), nullable=False)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Subtype columns load with every Item row, so they never trigger extra SELECTs.
    __mapper_args__ = {"polymorphic_on": "dtype", "with_polymorphic": "*"}

    def add_stock(self, quantity: int) -> None:
        self.stock_quantity += quantity

    def remove_stock(self, quantity: int) -> None:
        rest_stock = self.stock_quantity - quantity
        if rest_stock < 0:
            raise NotEnoughStockError()
        self.stock_quantity = rest_stock


class Book(Item):
    author: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    isbn: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "B"}


class Album(Item):
    artist: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    etc: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "A"}


class Movie(Item):
    director: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    actor: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "M"}


class Delivery(Base):
    """delivery table."""

    __tablename__ = "delivery"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    city: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    street: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    zipcode: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    address: Mapped[Address] = composite(Address, "city", "street", "zipcode")

    status: Mapped[DeliveryStatus] = mapped_column(
        Enum(DeliveryStatus, native_enum=False, length=10),
        nullable=False,
        default=DeliveryStatus.READY,
    )

    order: Mapped[Optional["Order"]] = relationship("Order", back_populates="delivery", uselist=False)


class Order(Base):
    """orders table."""

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    member_id: Mapped[int] = mapped_column(Integer, ForeignKey("member.id"), nullable=False)
    delivery_id: Mapped[int] = mapped_column(Integer, ForeignKey("delivery.id"), nullable=False, unique=True)

    order_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    status: Mapped[OrderStatus] = mapped_column(Enum(OrderStatus, native_enum=False, length=10), nullable=False)

    member: Mapped[Member] = relationship("Member", back_populates="orders")
    delivery: Mapped[Delivery] = relationship("Delivery", back_populates="order", cascade="all")
    order_items: Mapped[List["OrderItem"]] = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )

    def add_order_item(self, order_item: "OrderItem") -> None:
        self.order_items.append(order_item)

    @classmethod
    def create(cls, member: Member, delivery: Delivery, *order_items: "OrderItem") -> "Order":
        """Build a new order in ORDER status, dated now."""
        order = cls(
            member=member,
            delivery=delivery,
            status=OrderStatus.ORDER,
            order_date=datetime.now(),
        )
        for order_item in order_items:
            order.add_order_item(order_item)
        return order

    def cancel(self) -> None:
        """Cancel the order and put every item's count back into stock."""
        if self.status == OrderStatus.CANCEL:
            raise OrderAlreadyCancelledError()
        if self.delivery.status == DeliveryStatus.COMP:
            raise OrderCancelNotAllowedError()
        self.status = OrderStatus.CANCEL
        for order_item in self.order_items:
            order_item.cancel()

    @property
    def total_price(self) -> int:
        return sum(order_item.total_price for order_item in self.order_items)


class OrderItem(Base):
    """order_item table."""

    __tablename__ = "order_item"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    item_id: Mapped[int] = mapped_column(Integer, ForeignKey("item.id"), nullable=False)
    order_id: Mapped[int] = mapped_column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)

    order_price: Mapped[int] = mapped_column(Integer, nullable=False)
    count: Mapped[int] = mapped_column(Integer, nullable=False)

    item: Mapped[Item] = relationship("Item")
    order: Mapped[Order] = relationship("Order", back_populates="order_items")

    @classmethod
    def create(cls, item: Item, order_price: int, count: int) -> "OrderItem":
        item.remove_stock(count)
        return cls(item=item, order_price=order_price, count=count)

    def cancel(self) -> None:
        self.item.add_stock(self.count)

    @property
    def total_price(self) -> int:
        return self.order_price * self.count
