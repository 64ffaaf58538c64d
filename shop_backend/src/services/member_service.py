from __future__ import annotations

from typing import List

from sqlalchemy.orm import Session

from src.core.errors import DuplicateMemberError, MemberNotFoundError
from src.core.observability import log_event
from src.db.models import Member
from src.repositories.member_repository import MemberRepository


def join(db: Session, member: Member) -> int:
    """Register a new member and return its id. Names must be unique."""
    repository = MemberRepository(db)
    if repository.find_by_name(member.name):
        raise DuplicateMemberError()

    repository.save(member)
    db.commit()
    log_event("member_joined", member_id=member.id)
    return member.id


def find_members(db: Session) -> List[Member]:
    return MemberRepository(db).find_all()


def find_one(db: Session, member_id: int) -> Member:
    member = MemberRepository(db).find_one(member_id)
    if member is None:
        raise MemberNotFoundError(member_id)
    return member


def update(db: Session, member_id: int, name: str) -> Member:
    """Rename a member. The new name must not belong to another member."""
    member = find_one(db, member_id)
    if any(other.id != member_id for other in MemberRepository(db).find_by_name(name)):
        raise DuplicateMemberError()

    member.name = name
    db.commit()
    log_event("member_updated", member_id=member_id)
    return member
