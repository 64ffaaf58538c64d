from __future__ import annotations

from typing import List

from sqlalchemy.orm import Session

from src.core.errors import ItemNotFoundError
from src.db.models import Item
from src.repositories.item_repository import ItemRepository


def save_item(db: Session, item: Item) -> int:
    ItemRepository(db).save(item)
    db.commit()
    return item.id


def find_items(db: Session) -> List[Item]:
    return ItemRepository(db).find_all()


def find_one(db: Session, item_id: int) -> Item:
    item = ItemRepository(db).find_one(item_id)
    if item is None:
        raise ItemNotFoundError(item_id)
    return item


def update_item(db: Session, item_id: int, name: str, price: int, stock_quantity: int) -> Item:
    item = find_one(db, item_id)
    item.name = name
    item.price = price
    item.stock_quantity = stock_quantity
    db.commit()
    return item
