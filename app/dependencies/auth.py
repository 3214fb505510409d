from typing import Optional
from fastapi import Depends
from fastapi.security import APIKeyCookie
from jose import jwt, JWTError

from app.core.config import settings
from app.core.exceptions import UnauthorizedError, ForbiddenError
from app.models.member import Authority
from app.schemas.auth import MemberIdentity

cookie_scheme = APIKeyCookie(name=settings.ACCESS_TOKEN_COOKIE_NAME, auto_error=False)

credentials_exception = UnauthorizedError()


def decode_access_token(token: str) -> MemberIdentity:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
        member_id = payload.get("sub")
        role = payload.get("role")
        if member_id is None or role is None:
            raise credentials_exception
        return MemberIdentity(member_id=int(member_id), authority=Authority(role))
    except (JWTError, ValueError):
        # 서명 불일치, 만료, 잘못된 클레임
        raise credentials_exception


def get_current_identity(
    token: Optional[str] = Depends(cookie_scheme)
) -> MemberIdentity:
    if not token:
        raise credentials_exception
    return decode_access_token(token)


def get_member_owner(
    member_id: int,
    identity: MemberIdentity = Depends(get_current_identity)
) -> MemberIdentity:
    """경로의 member_id 가 본인일 때만 통과. 폼 검증보다 먼저 실행되어야 함"""
    if identity.member_id != member_id:
        raise ForbiddenError()
    return identity
