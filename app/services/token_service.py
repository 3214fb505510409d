import jwt
from datetime import datetime, timedelta

from app.core.config import settings
from app.models.member import Authority
from app.schemas.auth import CookieDirective


def create_access_token(member_id: int, authority: Authority) -> str:
    now = datetime.utcnow()
    to_encode = {
        "sub": str(member_id),
        "role": Authority(authority).value,
        "iat": now,
        "exp": now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    }
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def build_token_cookie(token: str) -> CookieDirective:
    return CookieDirective(
        name=settings.ACCESS_TOKEN_COOKIE_NAME,
        value=token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        secure=settings.COOKIE_SECURE,
        same_site=settings.COOKIE_SAMESITE,
    )


def invalidate_token_cookie(cookie_name: str = None) -> CookieDirective:
    """
    같은 이름, 빈 값, Max-Age=0 쿠키로 클라이언트에서 토큰을 삭제하도록 지시.
    서버 측 저장소는 없으므로 이미 탈취된 토큰은 만료 시각까지 유효함.
    """
    return CookieDirective(
        name=cookie_name or settings.ACCESS_TOKEN_COOKIE_NAME,
        value="",
        max_age=0,
        secure=settings.COOKIE_SECURE,
        same_site=settings.COOKIE_SAMESITE,
    )
