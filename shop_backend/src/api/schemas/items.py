from typing import Annotated, Literal, Optional, Union

from pydantic import Field, RootModel

from src.core.dto import CamelModel
from src.db.models import Album, Book, Item, Movie

_ITEM_TYPES = {"B": "book", "A": "album", "M": "movie"}


class _ItemFields(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    price: int = Field(ge=0)
    stock_quantity: int = Field(ge=0)


class BookCreateRequest(_ItemFields):
    type: Literal["book"]
    author: Optional[str] = None
    isbn: Optional[str] = None

    def to_entity(self) -> Book:
        return Book(
            name=self.name,
            price=self.price,
            stock_quantity=self.stock_quantity,
            author=self.author,
            isbn=self.isbn,
        )


class AlbumCreateRequest(_ItemFields):
    type: Literal["album"]
    artist: Optional[str] = None
    etc: Optional[str] = None

    def to_entity(self) -> Album:
        return Album(
            name=self.name,
            price=self.price,
            stock_quantity=self.stock_quantity,
            artist=self.artist,
            etc=self.etc,
        )


class MovieCreateRequest(_ItemFields):
    type: Literal["movie"]
    director: Optional[str] = None
    actor: Optional[str] = None

    def to_entity(self) -> Movie:
        return Movie(
            name=self.name,
            price=self.price,
            stock_quantity=self.stock_quantity,
            director=self.director,
            actor=self.actor,
        )


class ItemCreateRequest(
    RootModel[
        Annotated[
            Union[BookCreateRequest, AlbumCreateRequest, MovieCreateRequest],
            Field(discriminator="type"),
        ]
    ]
):
    """Item payload; `type` (book, album or movie) picks the concrete item."""

    def to_entity(self) -> Item:
        return self.root.to_entity()


class ItemUpdateRequest(_ItemFields):
    pass


class ItemDto(CamelModel):
    id: int
    type: str
    name: str
    price: int
    stock_quantity: int

    @classmethod
    def from_item(cls, item: Item) -> "ItemDto":
        return cls(
            id=item.id,
            type=_ITEM_TYPES.get(item.dtype, item.dtype),
            name=item.name,
            price=item.price,
            stock_quantity=item.stock_quantity,
        )
