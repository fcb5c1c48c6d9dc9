# stub_server/models.py
from typing import Optional

from pydantic import BaseModel


class LoginIn(BaseModel):
    email: str
    password: str


class RegisterIn(BaseModel):
    name: str
    phone: str
    email: str
    password: str
    confirmPassword: str
    avatar: Optional[str] = None


class ProfileIn(BaseModel):
    name: str
    phone: str
    email: str
    avatar: Optional[str] = None


class PasswordIn(BaseModel):
    currentPassword: str
    newPassword: str
    confirmPassword: str
