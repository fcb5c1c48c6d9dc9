# marketplace/client.py
from typing import Any, List, Optional

from .api import ApiClient
from .auth import AuthService
from .catalog import CatalogService
from .config import Settings, get_settings
from .home import HomeData, load_home
from .models import Product, ProductFilters, User
from .profile import ProfileService
from .session import FileSessionStore, SessionState, SessionStore


class MarketplaceClient:
    """One session store, one ApiClient per service domain, the three services.

    ``http`` lets callers share a single HTTP session (e.g. a TestClient)
    across the three API clients; by default each gets its own requests.Session.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session_store: Optional[SessionStore] = None,
        http: Any = None,
    ):
        self.settings = settings or get_settings()
        self.session_store = session_store or FileSessionStore(self.settings.token_path)

        base_url = self.settings.api_base_url
        timeout = self.settings.timeout
        self.auth_api = ApiClient(base_url, timeout=timeout, session=http, name="auth")
        self.profile_api = ApiClient(base_url, self.session_store, timeout=timeout, session=http, name="profile")
        self.catalog_api = ApiClient(base_url, self.session_store, timeout=timeout, session=http, name="catalog")

        self.auth = AuthService(self.auth_api, self.session_store)
        self.profile = ProfileService(self.profile_api)
        self.catalog = CatalogService(self.catalog_api)

    # Session lifecycle
    @property
    def state(self) -> SessionState:
        return self.session_store.state

    def login(self, email: str, password: str) -> User:
        resp = self.auth.login(email, password)
        self.session_store.set(resp.token)
        return resp.user

    def register(self, name: str, phone: str, email: str, password: str, confirm_password: str,
                 avatar: Optional[str] = None) -> User:
        resp = self.auth.register(name, phone, email, password, confirm_password, avatar)
        self.session_store.set(resp.token)
        return resp.user

    def logout(self) -> None:
        self.auth.logout()

    # Profile
    def get_profile(self) -> User:
        return self.profile.get_profile()

    def update_profile(self, name: str, phone: str, email: str, avatar: Optional[str] = None) -> User:
        return self.profile.update_profile(name, phone, email, avatar)

    def update_password(self, current_password: str, new_password: str, confirm_password: str) -> None:
        self.profile.update_password(current_password, new_password, confirm_password)

    # Catalog
    def list_products(self, filters: Optional[ProductFilters] = None) -> List[Product]:
        return self.catalog.list_products(filters)

    def get_product(self, product_id: str) -> Product:
        return self.catalog.get_product(product_id)

    def list_categories(self) -> List[str]:
        return self.catalog.list_categories()

    async def load_home(self, filters: Optional[ProductFilters] = None) -> HomeData:
        return await load_home(self.profile, self.catalog, filters)

    def close(self):
        # a shared http session is closed once
        seen = set()
        for api in (self.auth_api, self.profile_api, self.catalog_api):
            if id(api.session) not in seen:
                seen.add(id(api.session))
                api.close()
