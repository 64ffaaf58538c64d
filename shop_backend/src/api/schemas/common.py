from typing import Generic, TypeVar

from src.core.dto import CamelModel

T = TypeVar("T")


class Result(CamelModel, Generic[T]):
    """Envelope so list responses can grow extra top-level fields later."""

    data: T


class IdResponse(CamelModel):
    id: int
