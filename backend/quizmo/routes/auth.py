import logging
import re

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, EmailStr, field_validator

from quizmo.services.auth import (
    register_user,
    authenticate_user,
    get_current_user,
    create_access_token,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/auth")

_USERNAME_RE = re.compile(r"^[a-zA-Z0-9_]+$")


class RegisterRequest(BaseModel):
    username: str
    email: EmailStr
    password: str

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 3 or len(v) > 30:
            raise ValueError("Username must be between 3 and 30 characters")
        if not _USERNAME_RE.match(v):
            raise ValueError("Username can only contain letters, numbers, and underscores")
        return v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if len(v) < 6:
            raise ValueError("Password must be at least 6 characters long")
        if not any(c.isupper() for c in v):
            raise ValueError("Password must contain at least one uppercase letter")
        if not any(c.islower() for c in v):
            raise ValueError("Password must contain at least one lowercase letter")
        if not any(c.isdigit() for c in v):
            raise ValueError("Password must contain at least one digit")
        return v


class LoginRequest(BaseModel):
    email: EmailStr
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("password")
    @classmethod
    def require_password(cls, v: str) -> str:
        if not v:
            raise ValueError("Password is required")
        return v


class UserResponse(BaseModel):
    id: str
    username: str
    email: str


def _user_payload(user) -> dict:
    return UserResponse(id=str(user.id), username=user.username, email=user.email).model_dump()


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest):
    logger.info(f"Registration attempt for email: {request.email}")
    user = await register_user(request.email, request.username, request.password)
    token = create_access_token(data={"sub": str(user.id)})
    logger.info(f"User registered successfully: {user.id}")
    return {
        "success": True,
        "message": "User created successfully",
        "token": token,
        "user": _user_payload(user),
    }


@router.post("/login")
async def login(request: LoginRequest):
    logger.info(f"Login attempt for email: {request.email}")
    user = await authenticate_user(request.email, request.password)

    if not user:
        logger.warning(f"Failed login attempt for email: {request.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )

    token = create_access_token(data={"sub": str(user.id)})
    logger.info(f"User logged in successfully: {user.id}")
    return {
        "success": True,
        "message": "Login successful",
        "token": token,
        "user": _user_payload(user),
    }


@router.get("/verify")
async def verify(current_user=Depends(get_current_user)):
    return {"success": True, "user": _user_payload(current_user)}
