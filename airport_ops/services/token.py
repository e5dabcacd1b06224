import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from airport_ops.config import get_secret_key, get_token_expire_minutes

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
SESSION_COOKIE = "session"


def create_access_token(data: dict, expires_delta: timedelta = None):
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=get_token_expire_minutes())

    to_encode.update({"exp": expire})

    # Asegurarse de que el 'sub' sea un string
    if 'sub' in to_encode:
        to_encode['sub'] = str(to_encode['sub'])

    return jwt.encode(to_encode, get_secret_key(), algorithm=ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    try:
        return jwt.decode(token, get_secret_key(), algorithms=[ALGORITHM])
    except JWTError as e:
        logger.warning(f"Invalid session token: {e}")
        return None
