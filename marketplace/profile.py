# marketplace/profile.py
from typing import Optional

from .api import ApiClient
from .errors import AuthError, ServerError
from .models import User, dump_body, parse
from .validation import validate_password_change, validate_profile


class ProfileService:
    def __init__(self, api: ApiClient):
        self.api = api

    def get_profile(self) -> User:
        return parse(User, self.api.get("/user/profile"))

    def update_profile(self, name: str, phone: str, email: str, avatar: Optional[str] = None) -> User:
        # the full editable set is sent every time
        validate_profile(name, phone, email)
        body = self.api.put("/user/profile", json=dump_body({
            "name": name,
            "phone": phone,
            "email": email,
            "avatar": avatar,
        }))
        return parse(User, body)

    def update_password(self, current_password: str, new_password: str, confirm_password: str) -> None:
        validate_password_change(current_password, new_password, confirm_password)
        try:
            self.api.put("/user/password", json={
                "currentPassword": current_password,
                "newPassword": new_password,
                "confirmPassword": confirm_password,
            })
        except ServerError as e:
            if e.status_code is not None and 400 <= e.status_code < 500:
                raise AuthError(e.message, status_code=e.status_code) from e
            raise
