import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./member.db")

    AWS_ACCESS_KEY = os.getenv("AWS_ACCESS_KEY", "accesskey")
    AWS_SECRET_KEY = os.getenv("AWS_SECRET_KEY", "supersecret")
    AWS_REGION = os.getenv("AWS_REGION", "ap-northeast-2")
    AWS_S3_BUCKET_NAME = os.getenv("AWS_S3_BUCKET_NAME", "kream-images")
    # MinIO 등 S3 호환 스토리지 사용 시 지정
    AWS_S3_ENDPOINT_URL = os.getenv("AWS_S3_ENDPOINT_URL")
    AWS_S3_PRESIGNED_URL = _as_bool(os.getenv("AWS_S3_PRESIGNED_URL", "false"))
    AWS_S3_PRESIGNED_EXPIRE_SECONDS = int(os.getenv("AWS_S3_PRESIGNED_EXPIRE_SECONDS", 3600))

    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "jwt-secret")
    JWT_ALGORITHM = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 30))

    ACCESS_TOKEN_COOKIE_NAME = os.getenv("ACCESS_TOKEN_COOKIE_NAME", "accessToken")
    COOKIE_SECURE = _as_bool(os.getenv("COOKIE_SECURE", "false"))
    COOKIE_SAMESITE = os.getenv("COOKIE_SAMESITE", "lax")

settings = Settings()
