from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.api.schemas.common import Result
from src.api.schemas.members import (
    CreateMemberRequest,
    CreateMemberResponse,
    MemberDto,
    MemberEntity,
    UpdateMemberRequest,
    UpdateMemberResponse,
)
from src.db.models import Address, Member
from src.db.session import get_db
from src.services import member_service

router = APIRouter(tags=["Members"])


@router.get("/api/v1/members", response_model=List[MemberEntity], summary="List members (entity shape)")
def members_v1(db: Session = Depends(get_db)) -> List[MemberEntity]:
    """
    Expose the member entity directly.

    The response is tied to the table layout: renaming a column changes the API.
    """
    return [MemberEntity.model_validate(member) for member in member_service.find_members(db)]


@router.get("/api/v2/members", response_model=Result[List[MemberDto]], summary="List members")
def members_v2(db: Session = Depends(get_db)) -> Result[List[MemberDto]]:
    """Return member names wrapped in a `data` envelope."""
    members = member_service.find_members(db)
    return Result[List[MemberDto]](data=[MemberDto(name=member.name) for member in members])


@router.post(
    "/api/v1/members",
    response_model=CreateMemberResponse,
    summary="Create member from the entity shape",
)
def save_member_v1(member: MemberEntity, db: Session = Depends(get_db)) -> CreateMemberResponse:
    """Accept the entity shape as the request body; any client-sent id is ignored."""
    address = Address(**member.address.model_dump()) if member.address else Address()
    member_id = member_service.join(db, Member(name=member.name, address=address))
    return CreateMemberResponse(id=member_id)


@router.post("/api/v2/members", response_model=CreateMemberResponse, summary="Create member")
def save_member_v2(request: CreateMemberRequest, db: Session = Depends(get_db)) -> CreateMemberResponse:
    member_id = member_service.join(db, Member(name=request.name, address=Address()))
    return CreateMemberResponse(id=member_id)


@router.put(
    "/api/v2/members/{member_id}",
    response_model=UpdateMemberResponse,
    summary="Update member name",
)
def update_member_v2(
    member_id: int,
    request: UpdateMemberRequest,
    db: Session = Depends(get_db),
) -> UpdateMemberResponse:
    member_service.update(db, member_id, request.name)
    found = member_service.find_one(db, member_id)
    return UpdateMemberResponse(id=found.id, name=found.name)
