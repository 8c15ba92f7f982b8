# museum_cms/core/crud_base.py

"""
리소스 공통 서비스(검증 + CRUD) 기본 클래스 모듈입니다.

교육 영역, 추천 활동, 전시실은 모두 같은 모양을 가지므로, 리소스 기술자
(모델, 고유 키 필드, 필수 필드, 수정 가능 필드, 표시 이름)만 달리하여
이 클래스 하나로 처리합니다. 모든 메서드는 ServiceResponse 봉투를 반환하며,
연결 오류 등 저장소 수준의 예외는 잡지 않고 호출자(컨트롤러)로 전파합니다.
"""

import logging
import uuid
from typing import Any, Dict, Generic, Optional, Sequence, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from museum_cms.core.exceptions import DuplicateKeyError
from museum_cms.core.service_response import ServiceResponse

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

MISSING_FIELD_ERROR = "Missing required field."
NO_CHANGES_ERROR = "No changes to make."
UPDATE_FAILED_ERROR = "Something went wrong."
REMOVE_FAILED_ERROR = "Something went wrong. Try again later."


def _as_dict(obj_in: Union[BaseModel, Dict[str, Any], None]) -> Dict[str, Any]:
    if obj_in is None:
        return {}
    if isinstance(obj_in, dict):
        return obj_in
    return obj_in.model_dump()


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    리소스 하나에 대한 검증 및 CRUD 작업을 정의합니다.

    - unique_field: 중복이 허용되지 않는 필드 (name, title, room_code)
    - required_fields: 생성 시 반드시 값이 있어야 하는 필드
    - updatable_fields: 부분 수정(patch)에 사용할 수 있는 필드
    - label / label_plural: 오류 메시지에 쓰는 리소스 이름
    - duplicate_message: 고유 키 중복 시 클라이언트에 돌려줄 메시지
    """

    def __init__(
        self,
        model: Type[ModelType],
        *,
        unique_field: str,
        required_fields: Sequence[str],
        updatable_fields: Sequence[str],
        label: str,
        label_plural: Optional[str] = None,
        duplicate_message: Optional[str] = None,
    ):
        self.model = model
        self.unique_field = unique_field
        self.required_fields = tuple(required_fields)
        self.updatable_fields = tuple(updatable_fields)
        self.label = label
        self.label_plural = label_plural or f"{label}s"
        self.duplicate_message = duplicate_message or f"{label} already exists."

    # --- 순수 검증 (I/O 없음) ---
    def verify_fields(self, obj_in: Union[CreateSchemaType, Dict[str, Any]]) -> ServiceResponse:
        """필수 필드가 모두 채워져 있으면 성공. 어떤 필드가 빠졌는지는 알려주지 않습니다."""
        data = _as_dict(obj_in)
        if not all(data.get(field) for field in self.required_fields):
            return ServiceResponse.fail(MISSING_FIELD_ERROR)
        return ServiceResponse.ok()

    def verify_update(self, obj_in: Union[UpdateSchemaType, Dict[str, Any]]) -> ServiceResponse:
        """
        값이 있는(truthy) 필드만 담은 patch를 만듭니다.
        빈 문자열, 0, False 같은 값은 버려지므로 이런 값으로 필드를 지울 수는 없습니다.
        """
        data = _as_dict(obj_in)
        patch = {field: data[field] for field in self.updatable_fields if data.get(field)}
        if not patch:
            return ServiceResponse.fail(NO_CHANGES_ERROR)
        return ServiceResponse.ok(patch)

    # --- 조회 ---
    async def find_one_by_unique(self, db: AsyncSession, value: Any) -> ServiceResponse:
        statement = select(self.model).where(getattr(self.model, self.unique_field) == value)
        result = await db.exec(statement)
        db_obj = result.first()
        if db_obj is None:
            return ServiceResponse.fail(f"{self.label} not found.")
        return ServiceResponse.ok(db_obj)

    async def find_one_by_id(self, db: AsyncSession, id: uuid.UUID) -> ServiceResponse:
        # db.get()은 identity map을 먼저 보므로, 삭제 직후에도 객체가 남아 보일 수 있어 select를 사용합니다.
        statement = select(self.model).where(self.model.id == id)
        result = await db.exec(statement)
        db_obj = result.first()
        if db_obj is None:
            return ServiceResponse.fail(f"{self.label} not found.")
        return ServiceResponse.ok(db_obj)

    async def find_all(self, db: AsyncSession) -> ServiceResponse:
        """항상 성공 봉투를 반환합니다. 빈 목록의 404 처리는 컨트롤러가 합니다."""
        result = await db.exec(select(self.model))
        return ServiceResponse.ok(list(result.all()))

    # --- 변경 ---
    async def create(self, db: AsyncSession, *, obj_in: Union[CreateSchemaType, Dict[str, Any]]) -> ServiceResponse:
        """
        새 레코드를 저장합니다.
        고유 인덱스 충돌은 DuplicateKeyError로, 그 밖의 무결성 거부는 실패 봉투로 돌려줍니다.
        """
        data = _as_dict(obj_in)
        db_obj = self.model.model_validate(data)
        db.add(db_obj)
        try:
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            await self._raise_if_duplicate(db, data.get(self.unique_field))
            logger.warning("%s rejected by the store: %s", self.label, e.orig)
            return ServiceResponse.fail(f"{self.label} could not be saved.")

        await db.refresh(db_obj)
        logger.info("%s created: id=%s %s=%r", self.label, db_obj.id, self.unique_field, data.get(self.unique_field))
        return ServiceResponse.ok(db_obj)

    async def update_one_by_id(
        self, db: AsyncSession, *, db_obj: ModelType, patch: Dict[str, Any]
    ) -> ServiceResponse:
        """patch를 해당 id의 레코드에 적용하고, 다시 읽어온 레코드를 돌려줍니다."""
        # rollback 이후에는 db_obj 속성이 만료되므로 id를 미리 보관합니다.
        obj_id = db_obj.id
        statement = update(self.model).where(self.model.id == obj_id).values(**patch)
        try:
            result = await db.exec(statement)
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            if self.unique_field in patch:
                await self._raise_if_duplicate(db, patch[self.unique_field], exclude_id=obj_id)
            logger.warning("%s update rejected by the store: %s", self.label, e.orig)
            return ServiceResponse.fail(UPDATE_FAILED_ERROR)

        if not result.rowcount:
            return ServiceResponse.fail(UPDATE_FAILED_ERROR)

        await db.refresh(db_obj)
        logger.info("%s updated: id=%s fields=%s", self.label, obj_id, sorted(patch))
        return ServiceResponse.ok(db_obj)

    async def remove(self, db: AsyncSession, *, id: uuid.UUID) -> ServiceResponse:
        result = await db.exec(delete(self.model).where(self.model.id == id))
        await db.commit()
        if not result.rowcount:
            return ServiceResponse.fail(REMOVE_FAILED_ERROR)
        logger.info("%s removed: id=%s", self.label, id)
        return ServiceResponse.ok()

    async def _raise_if_duplicate(
        self, db: AsyncSession, value: Any, exclude_id: Optional[uuid.UUID] = None
    ) -> None:
        if value is None:
            return
        existing = await self.find_one_by_unique(db, value)
        if existing.success and existing.content.id != exclude_id:
            raise DuplicateKeyError(self.unique_field, value)
