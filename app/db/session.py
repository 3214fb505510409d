from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.core.config import settings

connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    # FastAPI 동기 엔드포인트는 스레드풀에서 실행됨
    connect_args = {"check_same_thread": False}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db():
    """모델 import 후 테이블 생성"""
    import app.models.member  # noqa: F401
    import app.models.image  # noqa: F401
    from app.db.base import Base

    Base.metadata.create_all(bind=engine)
