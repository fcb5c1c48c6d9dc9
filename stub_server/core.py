# stub_server/core.py
import uuid
from typing import Any, Dict, List, Optional

from fastapi import HTTPException

from .database import CATEGORIES, PRODUCTS, TOKENS, USERS, reset
from .models import LoginIn, PasswordIn, ProfileIn, RegisterIn

# This file contains the core logic for all API endpoints.


def _public_user(user: Dict[str, Any]) -> Dict[str, Any]:
    return {k: user.get(k) for k in ("id", "name", "email", "phone", "avatar")}


def _find_by_email(email: str) -> Optional[Dict[str, Any]]:
    email = email.lower()
    for u in USERS.values():
        if u["email"].lower() == email:
            return u
    return None


def _issue_token(user_id: str) -> str:
    token = uuid.uuid4().hex
    TOKENS[token] = user_id
    return token


def current_user(authorization: Optional[str]) -> Dict[str, Any]:
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="token missing")
    user_id = TOKENS.get(authorization[len("Bearer "):])
    if user_id is None or user_id not in USERS:
        raise HTTPException(status_code=401, detail="invalid token")
    return USERS[user_id]


# Auth endpoints
async def register_logic(payload: RegisterIn):
    if payload.password != payload.confirmPassword:
        raise HTTPException(status_code=400, detail="passwords do not match")
    if _find_by_email(payload.email):
        raise HTTPException(status_code=409, detail="email already registered")
    uid = uuid.uuid4().hex
    USERS[uid] = {
        "id": uid,
        "name": payload.name,
        "email": payload.email,
        "phone": payload.phone,
        "avatar": payload.avatar,
        "password": payload.password,
    }
    return {"token": _issue_token(uid), "user": _public_user(USERS[uid])}


async def login_logic(payload: LoginIn):
    user = _find_by_email(payload.email)
    if not user or user["password"] != payload.password:
        raise HTTPException(status_code=401, detail="invalid email or password")
    return {"token": _issue_token(user["id"]), "user": _public_user(user)}


# User endpoints
async def get_profile_logic(user: Dict[str, Any]):
    return _public_user(user)


async def update_profile_logic(user: Dict[str, Any], payload: ProfileIn):
    other = _find_by_email(payload.email)
    if other and other["id"] != user["id"]:
        raise HTTPException(status_code=409, detail="email already registered")
    user.update(name=payload.name, phone=payload.phone, email=payload.email)
    if payload.avatar is not None:
        user["avatar"] = payload.avatar
    return _public_user(user)


async def update_password_logic(user: Dict[str, Any], payload: PasswordIn):
    if user["password"] != payload.currentPassword:
        raise HTTPException(status_code=401, detail="current password is incorrect")
    if payload.newPassword != payload.confirmPassword:
        raise HTTPException(status_code=400, detail="passwords do not match")
    user["password"] = payload.newPassword


# Product endpoints
async def list_products_logic(
    search: Optional[str] = None,
    category: Optional[str] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
) -> List[Dict[str, Any]]:
    term = search.lower() if search else None
    out = []
    for p in PRODUCTS.values():
        if term and term not in p["title"].lower():
            continue
        if category and p["category"] != category:
            continue
        if min_price is not None and p["price"] < min_price:
            continue
        if max_price is not None and p["price"] > max_price:
            continue
        out.append(p)
    return out


async def get_product_logic(product_id: str):
    p = PRODUCTS.get(product_id)
    if not p:
        raise HTTPException(status_code=404, detail="product not found")
    p["views"] += 1
    return p


async def categories_logic():
    return list(CATEGORIES)


# Utility: reset (for tests/demo)
async def reset_all_logic(seed: bool = True):
    reset(seed)
    return {"status": "reset"}
