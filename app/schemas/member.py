import re
from typing import Optional, List

from fastapi import Form
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, EmailStr, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from app.models.member import Authority

PHONE_PATTERN = re.compile(r"^01[016789]\d{7,8}$")
PASSWORD_PATTERN = re.compile(r"^(?=.*[A-Za-z])(?=.*\d)(?=.*[^A-Za-z\d\s]).{8,20}$")


def _check_phone(value: str) -> str:
    if not PHONE_PATTERN.match(value):
        raise ValueError("휴대폰 번호 형식이 올바르지 않습니다. (예: 01012345678)")
    return value


def _check_password(value: str) -> str:
    if not PASSWORD_PATTERN.match(value):
        raise ValueError("비밀번호는 영문, 숫자, 특수문자를 포함한 8~20자여야 합니다.")
    return value


def _check_name(value: str) -> str:
    value = value.strip()
    if not value or len(value) > 50:
        raise ValueError("이름은 1~50자여야 합니다.")
    return value


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class MemberRegisterRequest(CamelModel):
    name: str
    email: EmailStr
    phone: str
    password: str
    is_male: bool = True

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _check_name(v)

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v):
        return _check_phone(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v):
        return _check_password(v)


class MemberRegisterResponse(CamelModel):
    id: int


class MemberLoginRequest(CamelModel):
    email: EmailStr
    password: str


class MemberLoginResponse(CamelModel):
    id: int
    email: str
    name: str


class MemberUpdateRequest(CamelModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return None if v is None else _check_name(v)

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v):
        return None if v is None else _check_phone(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v):
        return None if v is None else _check_password(v)

    @classmethod
    def as_form(
        cls,
        name: Optional[str] = Form(None),
        phone: Optional[str] = Form(None),
        password: Optional[str] = Form(None),
    ):
        # 빈 문자열은 "변경 안 함"으로 취급
        fields = {"name": name, "phone": phone, "password": password}
        fields = {k: v for k, v in fields.items() if v is not None and v.strip() != ""}
        try:
            return cls(**fields)
        except ValidationError as e:
            raise RequestValidationError(e.errors(include_url=False, include_context=False))


class MemberResponse(CamelModel):
    id: int
    name: str
    email: str
    phone: str
    is_male: bool
    authority: Authority
    image_paths: List[str] = []

    class Config(CamelModel.Config):
        from_attributes = True
