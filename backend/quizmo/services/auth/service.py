import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from quizmo.db.prisma_client import get_prisma
from quizmo.services.auth.security import decode_token, hash_password, verify_password

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


async def register_user(email: str, username: str, password: str):
    prisma = get_prisma()
    existing_user = await prisma.user.find_first(
        where={"OR": [{"email": email}, {"username": username}]}
    )

    if existing_user:
        field = "email" if existing_user.email == email else "username"
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "USER_EXISTS",
                "message": f"User with this {field} already exists",
            },
        )

    user = await prisma.user.create(
        data={
            "email": email,
            "username": username,
            "hashedPassword": hash_password(password),
        }
    )
    return user


async def authenticate_user(email: str, password: str):
    user = await get_prisma().user.find_unique(where={"email": email})

    if not user:
        return None
    if not verify_password(password, user.hashedPassword):
        return None
    return user


async def get_user_by_id(user_id: str):
    return await get_prisma().user.find_unique(where={"id": user_id})


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
):
    """Extract and validate user from Bearer token in Authorization header."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token is required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_token(credentials.credentials)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"}
        )

    if payload.get("type") != "access":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token type",
            headers={"WWW-Authenticate": "Bearer"}
        )

    user_id = payload.get("sub")
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
            headers={"WWW-Authenticate": "Bearer"}
        )

    user = await get_user_by_id(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"}
        )

    if not user.isActive:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User account is disabled"
        )

    return user
