"""Signup, login and token introspection."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..schemas.auth import LoginRequest, SignupRequest, UserResponse
from ..security.tokens import require_user
from ..services import auth_svc

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup")
async def signup(data: SignupRequest, db: AsyncSession = Depends(get_db)):
    if not data.email or not data.password:
        raise HTTPException(status_code=400, detail="email and password required")
    try:
        user = await auth_svc.signup(db, data.email, data.password, name=data.name)
    except auth_svc.UserExistsError:
        raise HTTPException(status_code=409, detail="User already exists")
    return {"ok": True, "user": UserResponse.model_validate(user).model_dump(mode="json")}


@router.post("/login")
async def login(data: LoginRequest, db: AsyncSession = Depends(get_db)):
    if not data.email or not data.password:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    result = await auth_svc.login(db, data.email, data.password)
    if result is None:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    user, token = result
    return {
        "ok": True,
        "token": token,
        "user": UserResponse.model_validate(user).model_dump(mode="json"),
    }


@router.get("/me")
async def me(claims: dict = Depends(require_user)):
    return {"ok": True, "user": {"id": claims.get("userId"), "email": claims.get("email")}}
