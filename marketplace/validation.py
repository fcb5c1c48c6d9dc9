"""Field checks run before any request leaves the client."""

import re
from typing import Dict, Optional

from .errors import ValidationError

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

MIN_NAME = 2
MIN_PHONE = 10
MIN_PASSWORD = 6


def _check_email(errors: Dict[str, str], email: Optional[str]):
    if not email or not EMAIL_RE.fullmatch(email):
        errors["email"] = "invalid email"


def _check_min(errors: Dict[str, str], field: str, value: Optional[str], size: int):
    if value is None or len(value) < size:
        errors[field] = f"must be at least {size} characters"


def _raise(errors: Dict[str, str]):
    if errors:
        raise ValidationError(fields=errors)


def validate_login(email: str, password: str):
    errors: Dict[str, str] = {}
    _check_email(errors, email)
    _check_min(errors, "password", password, MIN_PASSWORD)
    _raise(errors)


def validate_profile(name: str, phone: str, email: str):
    errors: Dict[str, str] = {}
    _check_min(errors, "name", name, MIN_NAME)
    _check_min(errors, "phone", phone, MIN_PHONE)
    _check_email(errors, email)
    _raise(errors)


def validate_registration(name: str, phone: str, email: str, password: str, confirm_password: str):
    errors: Dict[str, str] = {}
    _check_min(errors, "name", name, MIN_NAME)
    _check_min(errors, "phone", phone, MIN_PHONE)
    _check_email(errors, email)
    _check_min(errors, "password", password, MIN_PASSWORD)
    if password != confirm_password:
        errors["confirmPassword"] = "passwords do not match"
    _raise(errors)


def validate_password_change(current_password: str, new_password: str, confirm_password: str):
    errors: Dict[str, str] = {}
    if not current_password:
        errors["currentPassword"] = "current password is required"
    _check_min(errors, "newPassword", new_password, MIN_PASSWORD)
    if new_password != confirm_password:
        errors["confirmPassword"] = "passwords do not match"
    _raise(errors)
