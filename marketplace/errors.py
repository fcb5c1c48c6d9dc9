# marketplace/errors.py
from typing import Dict, Optional


class MarketplaceError(Exception):
    """Base failure surfaced by the SDK. Carries a kind and an optional message."""

    kind = "error"
    default_message = "Something went wrong"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.default_message
        self.status_code = status_code
        super().__init__(self.message)

    def __repr__(self):
        return f"{type(self).__name__}(message={self.message!r}, status_code={self.status_code!r})"


class ValidationError(MarketplaceError):
    """A client-side field check failed. Never reaches the network."""

    kind = "validation"
    default_message = "Invalid input"

    def __init__(self, message: Optional[str] = None, fields: Optional[Dict[str, str]] = None):
        self.fields = dict(fields or {})
        if message is None and self.fields:
            message = "; ".join(f"{name}: {msg}" for name, msg in self.fields.items())
        super().__init__(message)


class AuthError(MarketplaceError):
    kind = "auth"
    default_message = "Authentication failed"


class NotFoundError(MarketplaceError):
    kind = "not_found"
    default_message = "Resource not found"


class NetworkError(MarketplaceError):
    kind = "network"
    default_message = "Could not reach the server"


class ServerError(MarketplaceError):
    kind = "server"
    default_message = "The server returned an error"
