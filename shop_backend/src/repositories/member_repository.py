from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.db.models import Member


class MemberRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def save(self, member: Member) -> None:
        self.db.add(member)
        self.db.flush()

    def find_one(self, member_id: int) -> Optional[Member]:
        return self.db.get(Member, member_id)

    def find_all(self) -> List[Member]:
        return list(self.db.scalars(select(Member).order_by(Member.id)))

    def find_by_name(self, name: str) -> List[Member]:
        return list(self.db.scalars(select(Member).where(Member.name == name)))
