from typing import Optional

from fastapi import APIRouter, Depends, Body, File, Response, UploadFile, status
from sqlalchemy.orm import Session

from app.dependencies.db import get_db
from app.dependencies.auth import get_current_identity, get_member_owner
from app.schemas.auth import MemberIdentity, CookieDirective
from app.schemas.common import ApiResponse
from app.schemas.member import (
    MemberRegisterRequest, MemberRegisterResponse,
    MemberLoginRequest, MemberLoginResponse,
    MemberUpdateRequest, MemberResponse
)
from app.services.member_service import register_member, login_member, logout_member, get_member, update_member
from app.services.storage_service import S3ImageStore, get_image_store

router = APIRouter()


def apply_cookie(response: Response, cookie: CookieDirective) -> None:
    response.headers.append("set-cookie", cookie.to_header())


@router.post(
    "/signup",
    response_model=ApiResponse[MemberRegisterResponse],
    status_code=status.HTTP_201_CREATED,
    summary="회원가입"
)
def signup(
    member_in: MemberRegisterRequest = Body(...),
    db: Session = Depends(get_db)
):
    """
    회원가입 (비밀번호는 bcrypt 해시로 저장, 권한은 ROLE_USER 고정)
    """
    member_id = register_member(db, member_in)
    return ApiResponse(data=MemberRegisterResponse(id=member_id))


@router.post("/login", response_model=ApiResponse[MemberLoginResponse], summary="로그인")
def login(
    response: Response,
    login_req: MemberLoginRequest = Body(...),
    db: Session = Depends(get_db)
):
    """
    로그인
    - 이메일과 비밀번호를 받아 인증
    - 성공 시 access token 을 HttpOnly 쿠키로 발급
    """
    cookie, member = login_member(db, login_req.email, login_req.password)
    apply_cookie(response, cookie)
    return ApiResponse(data=member)


# "/{member_id}" 보다 먼저 등록되어야 함
@router.get("/logout", summary="로그아웃")
def logout(
    response: Response,
    identity: MemberIdentity = Depends(get_current_identity)
):
    """
    Max-Age=0 쿠키로 클라이언트의 토큰 삭제를 지시합니다.
    """
    apply_cookie(response, logout_member(identity))
    return ApiResponse(data={"id": identity.member_id})


@router.get("/{member_id}", response_model=ApiResponse[MemberResponse], summary="회원 정보 조회")
def read_member(
    member_id: int,
    db: Session = Depends(get_db)
):
    return ApiResponse(data=get_member(db, member_id))


@router.api_route(
    "/{member_id}",
    methods=["PUT", "POST"],
    response_model=ApiResponse[MemberResponse],
    summary="회원 정보 수정 (multipart)"
)
def modify_member(
    member_id: int,
    # 인증/소유자 확인이 폼 검증보다 먼저 실행되도록 가장 앞에 선언
    identity: MemberIdentity = Depends(get_member_owner),
    member_in: MemberUpdateRequest = Depends(MemberUpdateRequest.as_form),
    image_file: Optional[UploadFile] = File(None, alias="imageFile"),
    db: Session = Depends(get_db),
    store: S3ImageStore = Depends(get_image_store)
):
    """
    본인만 수정 가능
    - name, phone, password 중 전달된 값만 변경
    - imageFile 이 있으면 S3 업로드 후 프로필 이미지를 교체
    """
    return ApiResponse(data=update_member(db, store, identity, member_id, member_in, image_file))
