from typing import Optional

from pydantic import Field, field_validator

from src.api.schemas.common import IdResponse
from src.core.dto import AddressDto, CamelModel


class MemberEntity(CamelModel):
    """Member entity shape, used as-is by the v1 endpoints (orders are never exposed)."""

    id: Optional[int] = None
    name: str = Field(min_length=1, max_length=255)
    address: Optional[AddressDto] = None


class MemberDto(CamelModel):
    name: str


class CreateMemberRequest(CamelModel):
    name: str = Field(min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


class CreateMemberResponse(IdResponse):
    pass


class UpdateMemberRequest(CreateMemberRequest):
    pass


class UpdateMemberResponse(CamelModel):
    id: int
    name: str
