# marketplace/api.py
import logging
from typing import Any, Dict, Optional

import httpx
import requests

from .errors import AuthError, MarketplaceError, NetworkError, NotFoundError, ServerError
from .session import SessionStore

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}

# transport-level failures from either HTTP stack
TRANSPORT_ERRORS = (requests.exceptions.RequestException, httpx.TransportError)


def _server_message(response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        for key in ("message", "detail"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return None


def error_for_response(response) -> MarketplaceError:
    """Map a non-2xx response to the typed failure it represents."""
    status = response.status_code
    message = _server_message(response)
    if status in (401, 403):
        return AuthError(message, status_code=status)
    if status == 404:
        return NotFoundError(message, status_code=status)
    return ServerError(message or f"Request failed with status {status}", status_code=status)


class ApiClient:
    """JSON client for one service domain (auth, profile or catalog).

    When a session store is given, every request goes through ``decorate``
    which attaches ``Authorization: Bearer <token>`` if a token is stored.
    The auth client is built without a store and never sends a credential.
    """

    def __init__(
        self,
        base_url: str,
        session_store: Optional[SessionStore] = None,
        timeout: float = 10,
        session: Any = None,
        name: str = "api",
    ):
        self.base_url = base_url.rstrip("/")
        self.session_store = session_store
        self.timeout = timeout
        # anything with requests' .request(method, url, ...) signature
        self.session = session if session is not None else requests.Session()
        self.name = name

    @property
    def authenticated(self) -> bool:
        return self.session_store is not None

    def decorate(self, headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        out = dict(JSON_HEADERS)
        if headers:
            out.update(headers)
        if self.session_store is None:
            return out
        token = self.session_store.get()
        if token:
            out["Authorization"] = f"Bearer {token}"
        return out

    def request(self, method: str, path: str, params: Optional[Dict[str, str]] = None, json: Any = None) -> Any:
        headers = self.decorate()
        url = f"{self.base_url}{path}"
        logger.debug(
            "[%s] %s %s params=%s bearer=%s", self.name, method, path, params or {}, "Authorization" in headers
        )
        try:
            r = self.session.request(method, url, params=params or None, json=json, headers=headers, timeout=self.timeout)
        except TRANSPORT_ERRORS as e:
            logger.warning("[%s] %s %s failed: %s", self.name, method, path, e)
            raise NetworkError(str(e) or None) from e

        if not 200 <= r.status_code < 300:
            err = error_for_response(r)
            logger.info("[%s] %s %s -> %s %s", self.name, method, path, r.status_code, err.message)
            raise err

        if not r.content:
            return None
        try:
            return r.json()
        except ValueError as e:
            raise ServerError("Invalid JSON in response", status_code=r.status_code) from e

    def get(self, path: str, params: Optional[Dict[str, str]] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Any = None) -> Any:
        return self.request("POST", path, json=json)

    def put(self, path: str, json: Any = None) -> Any:
        return self.request("PUT", path, json=json)

    def close(self):
        close = getattr(self.session, "close", None)
        if close is not None:
            close()
