# marketplace/catalog.py
from typing import List, Optional
from urllib.parse import quote

from .api import ApiClient
from .errors import NotFoundError, ValidationError
from .models import Product, ProductFilters, parse, parse_list


class CatalogService:
    def __init__(self, api: ApiClient):
        self.api = api

    def list_products(self, filters: Optional[ProductFilters] = None) -> List[Product]:
        """Server order is kept as-is; no local sorting or range correction."""
        params = filters.to_query() if filters is not None else {}
        return parse_list(Product, self.api.get("/products", params=params))

    def get_product(self, product_id: str) -> Product:
        if not product_id or not str(product_id).strip():
            raise ValidationError(fields={"id": "product id is required"})
        body = self.api.get(f"/products/{quote(str(product_id), safe='')}")
        # a list means the id collided with a collection route such as /products/categories
        if not body or not isinstance(body, dict):
            raise NotFoundError(f"product {product_id} not found")
        return parse(Product, body)

    def list_categories(self) -> List[str]:
        body = self.api.get("/products/categories")
        return [str(c) for c in (body or [])]
