import logging
import secrets
from datetime import datetime, timedelta
from typing import Optional
from jose import JWTError, jwt
from fastapi import Cookie, Header
from app.config import settings
from app.core.exceptions import AuthException

logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "admin_session"


def credentials_match(email: str, password: str) -> bool:
    return (
        secrets.compare_digest(email or "", settings.ADMIN_EMAIL or "")
        and secrets.compare_digest(password or "", settings.ADMIN_PASSWORD or "")
    )


def create_session_token(email: str, expires_delta: Optional[timedelta] = None) -> str:
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(hours=settings.SESSION_EXPIRE_HOURS)

    to_encode = {"sub": email, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def verify_session_token(token: Optional[str]) -> Optional[str]:
    """Devuelve el email del admin si el token es válido, si no None."""
    if not token:
        return None
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.info(f"[AUTH] Sesión inválida: {e}")
        return None
    return payload.get("sub")


def is_admin_key_valid(admin_key: Optional[str]) -> bool:
    expected = settings.ADMIN_SECRET_KEY
    # Sin ADMIN_SECRET_KEY configurada se permite el acceso (desarrollo)
    if not expected:
        return True
    return admin_key is not None and secrets.compare_digest(admin_key, expected)


# =======================================================
# DEPENDENCIAS
# =======================================================
def require_admin_key(x_admin_key: Optional[str] = Header(None)) -> None:
    if not is_admin_key_valid(x_admin_key):
        logger.warning("[AUTH] x-admin-key rechazada")
        raise AuthException()


def require_admin_session(admin_session: Optional[str] = Cookie(None)) -> str:
    email = verify_session_token(admin_session)
    if email is None:
        raise AuthException()
    return email
