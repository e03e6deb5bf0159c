"""
Pydantic models for the bookstore collection.

``Book`` describes the shape the queries assume; nothing read back from the
database is validated against it.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

MAX_PAGE_SIZE = 100


class Book(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: str
    author: str
    genre: str
    published_year: int
    price: float
    in_stock: bool = True

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump()


class PageRequest(BaseModel):
    page: int = Field(default=1, ge=1, description="Page number (1-based)")
    page_size: int = Field(
        default=5,
        ge=1,
        le=MAX_PAGE_SIZE,
        description=f"Results per page (max {MAX_PAGE_SIZE})",
    )

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.page_size
