import logging
from typing import Optional

from fastapi import UploadFile
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import DuplicateEmailError, ForbiddenError, MemberNotFoundError
from app.models.image import Image, DomainType
from app.models.member import Member, Authority
from app.schemas.auth import MemberIdentity, CookieDirective
from app.schemas.member import (
    MemberRegisterRequest, MemberLoginResponse, MemberUpdateRequest, MemberResponse
)
from app.services.auth_service import authenticate_member, hash_password
from app.services.image_service import get_image_paths, save_image, delete_images_by_reference
from app.services.storage_service import S3ImageStore, generate_image_key
from app.services.token_service import create_access_token, build_token_cookie, invalidate_token_cookie

logger = logging.getLogger(__name__)


def get_member_by_email(db: Session, email: str) -> Optional[Member]:
    return db.query(Member).filter(Member.email == email).first()


def _to_response(db: Session, member: Member) -> MemberResponse:
    return MemberResponse(
        id=member.id,
        name=member.name,
        email=member.email,
        phone=member.phone,
        is_male=member.is_male,
        authority=member.authority,
        image_paths=get_image_paths(db, member.id, DomainType.MEMBER),
    )


def register_member(db: Session, member_in: MemberRegisterRequest) -> int:
    # 이메일 중복 체크
    if get_member_by_email(db, member_in.email):
        raise DuplicateEmailError()

    new_member = Member(
        name=member_in.name,
        email=member_in.email,
        password=hash_password(member_in.password),
        phone=member_in.phone,
        is_male=member_in.is_male,
        authority=Authority.ROLE_USER,  # 가입 시 권한은 항상 USER
    )
    db.add(new_member)
    try:
        db.commit()
    except IntegrityError:
        # 동시 가입으로 unique 제약에 걸린 경우
        db.rollback()
        raise DuplicateEmailError()
    db.refresh(new_member)
    logger.info(f"회원가입 완료 - id: {new_member.id}")
    return new_member.id


def login_member(db: Session, email: str, password: str) -> tuple[CookieDirective, MemberLoginResponse]:
    identity = authenticate_member(db, email, password)
    member = db.query(Member).filter(Member.id == identity.member_id).first()
    token = create_access_token(identity.member_id, identity.authority)
    logger.info(f"로그인 성공 - id: {identity.member_id}")
    return build_token_cookie(token), MemberLoginResponse(id=member.id, email=member.email, name=member.name)


def logout_member(identity: MemberIdentity) -> CookieDirective:
    logger.info(f"로그아웃 - id: {identity.member_id}")
    return invalidate_token_cookie(settings.ACCESS_TOKEN_COOKIE_NAME)


def get_member(db: Session, member_id: int) -> MemberResponse:
    member = db.query(Member).filter(Member.id == member_id).first()
    if not member:
        raise MemberNotFoundError()
    return _to_response(db, member)


def update_member(
    db: Session,
    store: S3ImageStore,
    identity: MemberIdentity,
    member_id: int,
    member_in: MemberUpdateRequest,
    image_file: Optional[UploadFile] = None,
) -> MemberResponse:
    """
    회원 정보 수정 (이름/전화번호/비밀번호 + 선택적 프로필 이미지)

    - 이미지 업로드는 트랜잭션 밖에서 먼저 수행 (URL 이 DB 에 저장되어야 하므로)
    - 회원 필드 변경과 이미지 행 교체는 하나의 트랜잭션으로 커밋/롤백
    - 업로드 후 트랜잭션이 실패하면 스토리지에 고아 객체가 남음 (별도 정리하지 않음)
    """
    if identity.member_id != member_id:
        raise ForbiddenError()

    member = db.query(Member).filter(Member.id == member_id).first()
    if not member:
        raise MemberNotFoundError()

    bucket = settings.AWS_S3_BUCKET_NAME
    image_key = None
    image_url = None
    if image_file is not None and image_file.filename:
        image_key = generate_image_key(DomainType.MEMBER, image_file.filename)
        store.store(bucket, image_key, image_file.file.read(), image_file.content_type)

    try:
        if image_key is not None:
            image_url = store.resolve_url(bucket, image_key)

        if member_in.name is not None:
            member.name = member_in.name
        if member_in.phone is not None:
            member.phone = member_in.phone
        if member_in.password is not None:
            member.password = hash_password(member_in.password)

        if image_url is not None:
            # 기존 프로필 이미지 행은 새 이미지로 대체
            delete_images_by_reference(db, member_id, DomainType.MEMBER)
            save_image(db, Image(
                reference_id=member_id,
                domain_type=DomainType.MEMBER,
                full_path=image_url,
                original_name=image_file.filename,
            ))
        db.commit()
    except Exception:
        # URL 생성 실패 또는 DB 실패 모두 롤백 대상
        db.rollback()
        if image_key:
            logger.warning(f"회원 정보 수정 실패로 스토리지에 고아 객체가 남음 - bucket: {bucket}, key: {image_key}")
        raise

    db.refresh(member)
    logger.info(f"회원 정보 수정 완료 - id: {member_id}, image: {image_key}")
    return _to_response(db, member)
