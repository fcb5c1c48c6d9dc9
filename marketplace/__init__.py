"""Python client for the marketplace REST API."""

from .api import ApiClient
from .auth import AuthService
from .catalog import CatalogService
from .client import MarketplaceClient
from .config import Settings, get_settings
from .contact import format_price, whatsapp_url
from .errors import (
    AuthError,
    MarketplaceError,
    NetworkError,
    NotFoundError,
    ServerError,
    ValidationError,
)
from .home import HomeData, load_home
from .models import AuthResponse, Category, Product, ProductFilters, Seller, User
from .profile import ProfileService
from .session import FileSessionStore, MemorySessionStore, SessionState, SessionStore

__version__ = "0.1.0"

__all__ = [
    "ApiClient",
    "AuthError",
    "AuthResponse",
    "AuthService",
    "CatalogService",
    "Category",
    "FileSessionStore",
    "HomeData",
    "MarketplaceClient",
    "MarketplaceError",
    "MemorySessionStore",
    "NetworkError",
    "NotFoundError",
    "Product",
    "ProductFilters",
    "ProfileService",
    "Seller",
    "ServerError",
    "SessionState",
    "SessionStore",
    "Settings",
    "User",
    "ValidationError",
    "format_price",
    "get_settings",
    "load_home",
    "whatsapp_url",
]
