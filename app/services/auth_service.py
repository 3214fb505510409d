import logging
from sqlalchemy.orm import Session
from passlib.hash import bcrypt

from app.core.exceptions import InvalidCredentialsError
from app.models.member import Member
from app.schemas.auth import MemberIdentity

logger = logging.getLogger(__name__)

# 존재하지 않는 이메일도 동일한 해시 검증 비용을 들이기 위한 더미 해시
_DUMMY_HASH = bcrypt.hash("dummy-password-for-timing")


def hash_password(raw_password: str) -> str:
    return bcrypt.hash(raw_password)


def authenticate_member(db: Session, email: str, password: str) -> MemberIdentity:
    member = db.query(Member).filter(Member.email == email).first()
    if not member:
        bcrypt.verify(password, _DUMMY_HASH)
        logger.info(f"로그인 실패 - 이메일: {email}")
        raise InvalidCredentialsError()
    if not bcrypt.verify(password, member.password):
        logger.info(f"로그인 실패 - 이메일: {email}")
        raise InvalidCredentialsError()

    return MemberIdentity(member_id=member.id, authority=member.authority)

