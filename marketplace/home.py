# marketplace/home.py
import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .catalog import CatalogService
from .errors import MarketplaceError
from .models import Product, ProductFilters, User
from .profile import ProfileService

logger = logging.getLogger(__name__)


@dataclass
class HomeData:
    user: Optional[User] = None
    products: List[Product] = field(default_factory=list)
    errors: List[MarketplaceError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


async def load_home(
    profile: ProfileService,
    catalog: CatalogService,
    filters: Optional[ProductFilters] = None,
) -> HomeData:
    """Fetch the profile and the product list concurrently and join both.

    A failure on one side is recorded and the other result is still used.
    Anything that is not a MarketplaceError propagates.
    """
    user_res, products_res = await asyncio.gather(
        asyncio.to_thread(profile.get_profile),
        asyncio.to_thread(catalog.list_products, filters),
        return_exceptions=True,
    )

    data = HomeData()
    for res in (user_res, products_res):
        if isinstance(res, BaseException) and not isinstance(res, MarketplaceError):
            raise res

    if isinstance(user_res, MarketplaceError):
        logger.warning("Error loading user: %s", user_res.message)
        data.errors.append(user_res)
    else:
        data.user = user_res

    if isinstance(products_res, MarketplaceError):
        logger.warning("Error loading products: %s", products_res.message)
        data.errors.append(products_res)
    else:
        data.products = products_res
    return data
