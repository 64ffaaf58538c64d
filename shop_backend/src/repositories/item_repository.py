from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.db.models import Item


class ItemRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def save(self, item: Item) -> None:
        self.db.add(item)
        self.db.flush()

    def find_one(self, item_id: int) -> Optional[Item]:
        return self.db.get(Item, item_id)

    def find_all(self) -> List[Item]:
        return list(self.db.scalars(select(Item).order_by(Item.id)))
