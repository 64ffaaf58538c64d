from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ShopError(Exception):
    code: str
    message: str
    status_code: int = 400

    def __str__(self) -> str:
        return f"{self.code}:{self.message}"


class NotFoundError(ShopError):
    def __init__(self, entity: str, entity_id: object) -> None:
        super().__init__(code="NOT_FOUND", message=f"{entity} {entity_id} not found", status_code=404)


class MemberNotFoundError(NotFoundError):
    def __init__(self, member_id: object) -> None:
        super().__init__("member", member_id)


class ItemNotFoundError(NotFoundError):
    def __init__(self, item_id: object) -> None:
        super().__init__("item", item_id)


class OrderNotFoundError(NotFoundError):
    def __init__(self, order_id: object) -> None:
        super().__init__("order", order_id)


class DuplicateMemberError(ShopError):
    def __init__(self, message: str = "member already exists") -> None:
        super().__init__(code="DUPLICATE_MEMBER", message=message, status_code=409)


class NotEnoughStockError(ShopError):
    def __init__(self, message: str = "need more stock") -> None:
        super().__init__(code="NOT_ENOUGH_STOCK", message=message, status_code=400)


class OrderCancelNotAllowedError(ShopError):
    def __init__(self, message: str = "delivered orders cannot be cancelled") -> None:
        super().__init__(code="CANCEL_NOT_ALLOWED", message=message, status_code=400)


class OrderAlreadyCancelledError(OrderCancelNotAllowedError):
    def __init__(self) -> None:
        super().__init__("order is already cancelled")
