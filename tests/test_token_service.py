from datetime import datetime, timedelta

import jwt
import pytest

from app.core.config import settings
from app.core.exceptions import UnauthorizedError
from app.dependencies.auth import decode_access_token
from app.models.member import Authority
from app.services.token_service import create_access_token, build_token_cookie, invalidate_token_cookie


def test_access_token_claims():
    token = create_access_token(7, Authority.ROLE_ADMIN)
    payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    assert payload["sub"] == "7"
    assert payload["role"] == "ROLE_ADMIN"
    assert payload["exp"] > payload["iat"]


def test_decode_round_trip():
    identity = decode_access_token(create_access_token(3, Authority.ROLE_USER))
    assert identity.member_id == 3
    assert identity.authority == Authority.ROLE_USER


def test_decode_rejects_wrong_signature():
    token = jwt.encode({"sub": "1", "role": "ROLE_USER"}, "other-secret", algorithm="HS256")
    with pytest.raises(UnauthorizedError):
        decode_access_token(token)


def test_decode_rejects_expired_token():
    expired = datetime.utcnow() - timedelta(minutes=1)
    token = jwt.encode(
        {"sub": "1", "role": "ROLE_USER", "exp": expired},
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM
    )
    with pytest.raises(UnauthorizedError):
        decode_access_token(token)


def test_decode_rejects_unknown_role():
    token = jwt.encode({"sub": "1", "role": "ROLE_ROOT"}, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    with pytest.raises(UnauthorizedError):
        decode_access_token(token)


def test_token_cookie_header():
    header = build_token_cookie("abc").to_header()
    assert header.startswith(f"{settings.ACCESS_TOKEN_COOKIE_NAME}=abc; Max-Age={settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60};")
    assert "HttpOnly" in header


def test_invalidate_cookie_header():
    cookie = invalidate_token_cookie("accessToken")
    assert cookie.value == ""
    assert cookie.max_age == 0
    assert cookie.to_header().startswith("accessToken=; Max-Age=0;")
