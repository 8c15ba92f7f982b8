# museum_cms/core/controller.py

"""
모든 리소스 라우터가 공유하는 요청 처리 파이프라인입니다.

검증 → 존재/중복 조회 → 저장소 변경 → 상태 코드 매핑 순서로 진행하며,
서비스의 ServiceResponse를 HTTP 상태 코드로 바꾸는 일은 이 모듈에서만 합니다.

- 400: 입력 검증 실패 (필수 필드 누락, 변경할 필드 없음, 잘못된 id)
- 403: 고유 키 중복
- 404: 대상 없음
- 503: 저장소가 쓰기/삭제를 거부함 (실패 봉투)
- 500: 그 밖의 예외 (상세 내용은 로그에만 남김)
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Union

from fastapi import HTTPException, status
from sqlmodel.ext.asyncio.session import AsyncSession

from museum_cms.core.crud_base import CRUDBase
from museum_cms.core.exceptions import DuplicateKeyError
from museum_cms.utils.ids import parse_id

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal Server Error."
INVALID_ID_ERROR = "Invalid id."


@contextmanager
def _storage_guard(action: str, service: CRUDBase) -> Iterator[None]:
    """파이프라인 도중 발생한 예외를 HTTP 응답으로 변환합니다."""
    try:
        yield
    except HTTPException:
        raise
    except DuplicateKeyError as e:
        logger.warning("%s %s conflict: %s", service.label, action, e)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=service.duplicate_message)
    except Exception:
        logger.exception("Unexpected error during %s %s", service.label, action)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR) from None


def _require_id(id: str):
    obj_id = parse_id(id)
    if obj_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_ID_ERROR)
    return obj_id


def _not_found(service: CRUDBase, detail: Optional[str]) -> HTTPException:
    logger.warning("%s lookup failed: %s", service.label, detail)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


async def create_resource(db: AsyncSession, service: CRUDBase, obj_in: Any) -> Any:
    verified = service.verify_fields(obj_in)
    if not verified.success:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=verified.error)

    with _storage_guard("create", service):
        unique_value = getattr(obj_in, service.unique_field)
        existing = await service.find_one_by_unique(db, unique_value)
        if existing.success:
            logger.warning("%s with %s=%r already exists", service.label, service.unique_field, unique_value)
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=service.duplicate_message)

        created = await service.create(db, obj_in=obj_in)

    if not created.success:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=created.error)
    return created.content


async def update_resource(db: AsyncSession, service: CRUDBase, id: str, obj_in: Any) -> Any:
    obj_id = _require_id(id)

    verified = service.verify_update(obj_in)
    if not verified.success:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=verified.error)
    patch = verified.content

    with _storage_guard("update", service):
        existing = await service.find_one_by_id(db, obj_id)
        if not existing.success:
            raise _not_found(service, existing.error)

        # 고유 키를 다른 레코드가 이미 쓰고 있는 값으로 바꾸려는 경우
        if service.unique_field in patch:
            clash = await service.find_one_by_unique(db, patch[service.unique_field])
            if clash.success and clash.content.id != obj_id:
                raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=service.duplicate_message)

        updated = await service.update_one_by_id(db, db_obj=existing.content, patch=patch)

    if not updated.success:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=updated.error)
    return updated.content


async def remove_resource(db: AsyncSession, service: CRUDBase, id: str) -> None:
    obj_id = _require_id(id)

    with _storage_guard("remove", service):
        existing = await service.find_one_by_id(db, obj_id)
        if not existing.success:
            raise _not_found(service, existing.error)

        removed = await service.remove(db, id=obj_id)

    if not removed.success:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=removed.error)


async def find_resources(
    db: AsyncSession, service: CRUDBase, unique_value: Optional[str] = None
) -> Union[Any, List[Any]]:
    """unique_value가 있으면 단건 조회, 없으면 전체 목록을 반환합니다."""
    with _storage_guard("find", service):
        if unique_value:
            found = await service.find_one_by_unique(db, unique_value)
            if not found.success:
                raise _not_found(service, found.error)
            return found.content

        found = await service.find_all(db)

    if not found.content:
        raise _not_found(service, f"No {service.label_plural.lower()} found.")
    return found.content
