# stub_server/main.py
from typing import Optional

from fastapi import Depends, FastAPI, Header, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core import (
    categories_logic, current_user, get_product_logic, get_profile_logic, list_products_logic,
    login_logic, register_logic, reset_all_logic, update_password_logic, update_profile_logic,
)
from .database import REQUEST_LOG
from .models import LoginIn, PasswordIn, ProfileIn, RegisterIn

app = FastAPI(title="marketplace stub (in-memory)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def record_request(request: Request, call_next):
    REQUEST_LOG.append({
        "method": request.method,
        "path": request.url.path,
        "query": request.url.query,
        "authorization": request.headers.get("authorization"),
    })
    return await call_next(request)


@app.exception_handler(StarletteHTTPException)
async def message_body(request: Request, exc: StarletteHTTPException):
    # the real API answers errors as {"message": ...}
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})


def authenticated_user(authorization: Optional[str] = Header(None)):
    return current_user(authorization)


# ---------------------------
# Auth endpoints
# ---------------------------
@app.post("/auth/register", status_code=201)
async def register(payload: RegisterIn):
    return await register_logic(payload)


@app.post("/auth/login")
async def login(payload: LoginIn):
    return await login_logic(payload)


# ---------------------------
# User endpoints
# ---------------------------
@app.get("/user/profile")
async def get_profile(user=Depends(authenticated_user)):
    return await get_profile_logic(user)


@app.put("/user/profile")
async def update_profile(payload: ProfileIn, user=Depends(authenticated_user)):
    return await update_profile_logic(user, payload)


@app.put("/user/password", status_code=204)
async def update_password(payload: PasswordIn, user=Depends(authenticated_user)):
    await update_password_logic(user, payload)
    return Response(status_code=204)


# ---------------------------
# Product endpoints
# ---------------------------
@app.get("/products")
async def list_products(
    search: Optional[str] = None,
    category: Optional[str] = None,
    minPrice: Optional[float] = None,
    maxPrice: Optional[float] = None,
):
    return await list_products_logic(search, category, minPrice, maxPrice)


# declared before /products/{product_id} so it is not captured as an id
@app.get("/products/categories")
async def categories():
    return await categories_logic()


@app.get("/products/{product_id}")
async def get_product(product_id: str):
    return await get_product_logic(product_id)


# ---------------------------
# Utility: reset (for tests/demo)
# ---------------------------
@app.post("/reset")
async def reset_all(seed: bool = True):
    return await reset_all_logic(seed)


@app.get("/debug/requests")
async def debug_requests():
    return {"requests": REQUEST_LOG}
