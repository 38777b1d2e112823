import logging
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from typing import Optional
from app.config import settings
from app.core.exceptions import AuthException
from app.core.security import (
    SESSION_COOKIE_NAME,
    create_session_token,
    credentials_match,
    verify_session_token,
)
from app.schemas.auth import AuthStatus, Login

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login")
def login(login_data: Login, response: Response):
    if not settings.ADMIN_EMAIL or not settings.ADMIN_PASSWORD:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Admin credentials not configured"
        )

    if not credentials_match(login_data.email, login_data.password):
        logger.warning(f"[AUTH] Login fallido para {login_data.email}")
        raise AuthException("이메일 또는 비밀번호가 올바르지 않습니다.")

    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=create_session_token(login_data.email),
        httponly=True,
        secure=settings.SITE_URL.startswith("https://"),
        samesite="lax",
        max_age=settings.SESSION_EXPIRE_HOURS * 60 * 60,
        path="/",
    )
    logger.info(f"[AUTH] Admin autenticado: {login_data.email}")
    return {"success": True}


@router.get("/check", response_model=AuthStatus)
def check(admin_session: Optional[str] = Cookie(None)):
    return AuthStatus(authenticated=verify_session_token(admin_session) is not None)


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(SESSION_COOKIE_NAME, path="/")
    return {"success": True}
