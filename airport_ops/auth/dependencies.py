from typing import Optional

from fastapi import Depends, HTTPException, Request

from airport_ops.dependencies import get_storage
from airport_ops.schemas.user import User
from airport_ops.services.token import SESSION_COOKIE, decode_access_token
from airport_ops.storage.base import Storage


def current_user(request: Request, storage: Storage = Depends(get_storage)) -> Optional[User]:
    """User behind the session cookie, or None."""
    token = request.cookies.get(SESSION_COOKIE)
    if not token:
        return None
    payload = decode_access_token(token)
    if not payload or "sub" not in payload:
        return None
    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        return None
    return storage.get_user(user_id)


def require_auth(user: Optional[User] = Depends(current_user)) -> User:
    if user is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user
