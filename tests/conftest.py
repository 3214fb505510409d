import os

os.environ.setdefault("AWS_S3_BUCKET_NAME", "s3test")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")
os.environ.setdefault("ACCESS_TOKEN_COOKIE_NAME", "accessToken")

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.dependencies.db import get_db
from app.main import app
from app.models.image import Image, DomainType
from app.models.member import Member, Authority
from app.services.auth_service import hash_password
from app.services.storage_service import S3ImageStore, get_image_store

# 테스트용 회원 정보
TEST_EMAIL = "hello@naver.com"
TEST_NAME = "name"
TEST_PHONE = "01012345678"
TEST_PASSWORD = "Pa!12345678"
TEST_IMAGE_PATH = "/path/test1"

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def image_store():
    """boto3 대신 사용하는 목 스토어"""
    store = MagicMock(spec=S3ImageStore)
    store.resolve_url.return_value = "http://testURL"
    return store


@pytest.fixture
def client(db, image_store):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_image_store] = lambda: image_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def member(db):
    """기본 회원 + 프로필 이미지 1장"""
    member = Member(
        email=TEST_EMAIL,
        name=TEST_NAME,
        password=hash_password(TEST_PASSWORD),
        phone=TEST_PHONE,
        is_male=True,
        authority=Authority.ROLE_USER,
    )
    db.add(member)
    db.commit()
    db.refresh(member)

    db.add(Image(
        reference_id=member.id,
        domain_type=DomainType.MEMBER,
        full_path=TEST_IMAGE_PATH,
        original_name="profile1",
    ))
    db.commit()
    return member


def login(client, email=TEST_EMAIL, password=TEST_PASSWORD):
    return client.post("/api/v1/member/login", json={"email": email, "password": password})
