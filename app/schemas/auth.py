from typing import Optional
from pydantic import BaseModel
from app.models.member import Authority


class MemberIdentity(BaseModel):
    """쿠키 토큰에서 복원한 인증 주체. 라우터에서 서비스로 명시적으로 전달"""
    member_id: int
    authority: Authority

    class Config:
        frozen = True


class CookieDirective(BaseModel):
    name: str
    value: str
    max_age: int
    path: str = "/"
    http_only: bool = True
    secure: bool = False
    same_site: Optional[str] = "lax"

    class Config:
        frozen = True

    def to_header(self) -> str:
        # Starlette delete_cookie 는 name="" 로 렌더링하므로 직접 구성
        parts = [f"{self.name}={self.value}", f"Max-Age={self.max_age}", f"Path={self.path}"]
        if self.http_only:
            parts.append("HttpOnly")
        if self.secure:
            parts.append("Secure")
        if self.same_site:
            parts.append(f"SameSite={self.same_site.capitalize()}")
        return "; ".join(parts)
