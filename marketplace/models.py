# marketplace/models.py
from enum import Enum
from typing import Any, Dict, List, Optional, Union

import pydantic
from pydantic import BaseModel, Field

from .errors import ServerError


class Category(str, Enum):
    TOY = "Brinquedo"
    FURNITURE = "Móvel"
    STATIONERY = "Papelaria"
    HEALTH_BEAUTY = "Saúde & Beleza"
    UTENSIL = "Utensílio"
    CLOTHING = "Vestuário"


class User(BaseModel):
    id: str
    name: str
    email: str
    phone: str
    avatar: Optional[str] = None


class AuthResponse(BaseModel):
    token: str
    user: User


class Seller(BaseModel):
    id: str
    name: str
    phone: str


class Product(BaseModel):
    id: str
    title: str
    description: str
    price: float = Field(ge=0)
    category: Category
    images: List[str] = Field(default_factory=list)
    views: int = Field(default=0, ge=0)
    seller: Seller

    @property
    def thumbnail(self) -> Optional[str]:
        return self.images[0] if self.images else None


def _format_number(value: float) -> str:
    # 50 -> "50", 10.5 -> "10.5"
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


class ProductFilters(BaseModel):
    """Optional listing criteria. A field left as None is not sent at all."""

    search: Optional[str] = None
    category: Optional[Union[Category, str]] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None

    def to_query(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.search:
            params["search"] = self.search
        if self.category:
            params["category"] = self.category.value if isinstance(self.category, Category) else self.category
        # 0 is a real bound; only None means "absent"
        if self.min_price is not None:
            params["minPrice"] = _format_number(self.min_price)
        if self.max_price is not None:
            params["maxPrice"] = _format_number(self.max_price)
        return params

    def with_search(self, text: Optional[str]) -> "ProductFilters":
        """Merge a search box value in; empty text drops the search filter."""
        return self.model_copy(update={"search": text or None})

    def is_empty(self) -> bool:
        return not self.to_query()


def dump_body(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop optional keys that were not provided."""
    return {k: v for k, v in data.items() if v is not None}


def parse(model, data: Any):
    """Validate a response body into ``model``; a mismatch is a server fault."""
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        raise ServerError(f"Unexpected {model.__name__} payload: {e.error_count()} invalid field(s)") from e


def parse_list(model, data: Any) -> list:
    if not isinstance(data, list):
        raise ServerError(f"Expected a list of {model.__name__}")
    return [parse(model, item) for item in data]
