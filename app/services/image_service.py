from typing import List
from sqlalchemy.orm import Session
from app.models.image import Image, DomainType


def find_images_by_reference(db: Session, reference_id: int, domain_type: DomainType) -> List[Image]:
    """ (reference_id, domain_type) 로 이미지 조회. 등록 순서대로 정렬, 없으면 빈 리스트 """
    return (
        db.query(Image)
        .filter(Image.reference_id == reference_id, Image.domain_type == domain_type)
        .order_by(Image.id)
        .all()
    )


def get_image_paths(db: Session, reference_id: int, domain_type: DomainType) -> List[str]:
    return [image.full_path for image in find_images_by_reference(db, reference_id, domain_type)]


def save_image(db: Session, image: Image, commit: bool = False) -> Image:
    """
    기본은 flush 만 수행하여 id 를 할당받고, 커밋은 호출한 쪽 트랜잭션에 맡김
    """
    db.add(image)
    if commit:
        db.commit()
        db.refresh(image)
    else:
        db.flush()
    return image


def delete_images_by_reference(db: Session, reference_id: int, domain_type: DomainType) -> int:
    return (
        db.query(Image)
        .filter(Image.reference_id == reference_id, Image.domain_type == domain_type)
        .delete(synchronize_session=False)
    )
