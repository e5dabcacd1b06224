import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from airport_ops.auth.argon import hash_password, verify_password
from airport_ops.auth.dependencies import require_auth
from airport_ops.dependencies import get_storage
from airport_ops.errors import ValidationError
from airport_ops.schemas.stats import MessageResponse
from airport_ops.schemas.user import LoginRequest, RegisterRequest, UserResponse, User
from airport_ops.services.token import SESSION_COOKIE, create_access_token
from airport_ops.storage.base import Storage

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _start_session(response: Response, user: User):
    token = create_access_token(data={"sub": user.id})
    response.set_cookie(SESSION_COOKIE, token, httponly=True, samesite="lax")


@router.post("/register", response_model=UserResponse, status_code=201)
def register(request: RegisterRequest, response: Response, storage: Storage = Depends(get_storage)):
    if storage.get_user_by_username(request.username):
        raise ValidationError({"username": "Username already exists"})
    user = storage.create_user(request.username, hash_password(request.password))
    _start_session(response, user)
    logger.info(f"User registered: {user.username} (ID: {user.id})")
    return user


@router.post("/login", response_model=UserResponse)
def login(request: LoginRequest, response: Response, storage: Storage = Depends(get_storage)):
    user = storage.get_user_by_username(request.username)
    if not user or not verify_password(user.password, request.password):
        logger.warning(f"Failed login attempt: {request.username}")
        raise HTTPException(status_code=401, detail="Invalid username or password")
    _start_session(response, user)
    logger.info(f"User logged in: {user.username}")
    return user


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response):
    response.delete_cookie(SESSION_COOKIE)
    return {"message": "Logged out"}


@router.get("/user", response_model=UserResponse)
def get_current_user(user: User = Depends(require_auth)):
    return user
