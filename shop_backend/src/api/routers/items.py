from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.api.schemas.common import IdResponse
from src.api.schemas.items import ItemCreateRequest, ItemDto, ItemUpdateRequest
from src.db.session import get_db
from src.services import item_service

router = APIRouter(prefix="/api/v1/items", tags=["Items"])


@router.post("", response_model=IdResponse, summary="Create item")
def create_item(request: ItemCreateRequest, db: Session = Depends(get_db)) -> IdResponse:
    """Create a book, album or movie; `type` selects which."""
    item_id = item_service.save_item(db, request.to_entity())
    return IdResponse(id=item_id)


@router.get("", response_model=List[ItemDto], summary="List items")
def list_items(db: Session = Depends(get_db)) -> List[ItemDto]:
    return [ItemDto.from_item(item) for item in item_service.find_items(db)]


@router.put("/{item_id}", response_model=ItemDto, summary="Update item")
def update_item(item_id: int, request: ItemUpdateRequest, db: Session = Depends(get_db)) -> ItemDto:
    item = item_service.update_item(
        db,
        item_id,
        name=request.name,
        price=request.price,
        stock_quantity=request.stock_quantity,
    )
    return ItemDto.from_item(item)
