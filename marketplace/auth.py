# marketplace/auth.py
import logging
from typing import Optional

from .api import ApiClient
from .errors import AuthError, ServerError
from .models import AuthResponse, dump_body, parse
from .session import SessionState, SessionStore
from .validation import validate_login, validate_registration

logger = logging.getLogger(__name__)


def _as_auth_error(e: ServerError):
    # a 4xx on an auth endpoint means the submitted credentials were refused
    if e.status_code is not None and 400 <= e.status_code < 500:
        return AuthError(e.message, status_code=e.status_code)
    return e


class AuthService:
    """Login, registration and logout.

    ``login`` and ``register`` only return the issued token; persisting it is
    up to the caller (see ``MarketplaceClient``). ``logout`` clears the store.
    """

    def __init__(self, api: ApiClient, store: SessionStore):
        if api.authenticated:
            raise ValueError("auth endpoints must use an unauthenticated ApiClient")
        self.api = api
        self.store = store

    def login(self, email: str, password: str) -> AuthResponse:
        validate_login(email, password)
        try:
            body = self.api.post("/auth/login", json={"email": email, "password": password})
        except ServerError as e:
            raise _as_auth_error(e) from e
        resp = parse(AuthResponse, body)
        logger.info("Logged in as %s", resp.user.email)
        return resp

    def register(
        self,
        name: str,
        phone: str,
        email: str,
        password: str,
        confirm_password: str,
        avatar: Optional[str] = None,
    ) -> AuthResponse:
        validate_registration(name, phone, email, password, confirm_password)
        payload = dump_body({
            "name": name,
            "phone": phone,
            "email": email,
            "password": password,
            "confirmPassword": confirm_password,
            "avatar": avatar,
        })
        try:
            body = self.api.post("/auth/register", json=payload)
        except ServerError as e:
            raise _as_auth_error(e) from e
        resp = parse(AuthResponse, body)
        logger.info("Registered %s", resp.user.email)
        return resp

    def logout(self) -> None:
        self.store.clear()
        logger.info("Logged out")

    @property
    def state(self) -> SessionState:
        return self.store.state
