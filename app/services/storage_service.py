import os
import logging
from functools import lru_cache
from uuid import uuid4

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.core.config import settings
from app.core.exceptions import StoreUnavailableError
from app.models.image import DomainType

logger = logging.getLogger(__name__)


def generate_image_key(domain_type: DomainType, filename: str) -> str:
    """
    도메인별 폴더 아래 uuid 기반 키 생성 (예: member/3f2a...c1.png)
    """
    ext = os.path.splitext(filename or "")[1].lower()
    return f"{DomainType(domain_type).value.lower()}/{uuid4().hex}{ext}"


class S3ImageStore:
    """S3 호환 오브젝트 스토리지 어댑터"""

    def __init__(self, client, endpoint_url: str = None, region: str = None,
                 presigned: bool = False, presigned_expire: int = 3600):
        self.client = client
        self.endpoint_url = endpoint_url.rstrip("/") if endpoint_url else None
        self.region = region
        self.presigned = presigned
        self.presigned_expire = presigned_expire

    def store(self, bucket: str, key: str, data: bytes, content_type: str) -> None:
        # 같은 키로 다시 올리면 덮어씀
        try:
            self.client.put_object(
                Bucket=bucket,
                Key=key,
                Body=data,
                ContentType=content_type or "application/octet-stream",
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"S3 업로드 실패 - bucket: {bucket}, key: {key}, error: {e}")
            raise StoreUnavailableError()
        logger.info(f"S3 업로드 완료 - bucket: {bucket}, key: {key}")

    def resolve_url(self, bucket: str, key: str) -> str:
        if self.presigned:
            try:
                return self.client.generate_presigned_url(
                    "get_object",
                    Params={"Bucket": bucket, "Key": key},
                    ExpiresIn=self.presigned_expire,
                )
            except (BotoCoreError, ClientError) as e:
                logger.error(f"S3 presigned URL 생성 실패 - key: {key}, error: {e}")
                raise StoreUnavailableError()
        if self.endpoint_url:
            return f"{self.endpoint_url}/{bucket}/{key}"
        return f"https://{bucket}.s3.{self.region}.amazonaws.com/{key}"


@lru_cache()
def get_image_store() -> S3ImageStore:
    s3_client = boto3.client(
        "s3",
        aws_access_key_id=settings.AWS_ACCESS_KEY,
        aws_secret_access_key=settings.AWS_SECRET_KEY,
        region_name=settings.AWS_REGION,
        endpoint_url=settings.AWS_S3_ENDPOINT_URL,
    )
    return S3ImageStore(
        s3_client,
        endpoint_url=settings.AWS_S3_ENDPOINT_URL,
        region=settings.AWS_REGION,
        presigned=settings.AWS_S3_PRESIGNED_URL,
        presigned_expire=settings.AWS_S3_PRESIGNED_EXPIRE_SECONDS,
    )
