import enum
from sqlalchemy import Column, Integer, String, DateTime, Enum, Index
from sqlalchemy.sql import func
from app.db.base import Base


class DomainType(str, enum.Enum):
    MEMBER = "MEMBER"
    PRODUCT = "PRODUCT"


class Image(Base):
    __tablename__ = "image"
    __table_args__ = (
        Index("ix_image_reference", "reference_id", "domain_type"),
    )

    id = Column(Integer, primary_key=True, index=True)
    # 여러 도메인 테이블을 가리키므로 FK 제약을 두지 않음
    reference_id = Column(Integer, nullable=False)
    domain_type = Column(Enum(DomainType), nullable=False)
    full_path = Column(String(1023), nullable=False)  # S3 URL 또는 저장 경로
    original_name = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
