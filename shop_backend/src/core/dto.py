"""Pydantic base shared by the API payloads and the repository query DTOs."""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class AddressDto(CamelModel):
    city: Optional[str] = None
    street: Optional[str] = None
    zipcode: Optional[str] = None
