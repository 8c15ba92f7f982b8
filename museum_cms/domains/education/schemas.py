# museum_cms/domains/education/schemas.py

import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field


class EducationAreaBase(SQLModel):
    name: str = Field(..., max_length=100, description="교육 영역 이름")
    description: str = Field(..., description="교육 영역 설명")
    image: Optional[str] = Field(None, max_length=500, description="대표 이미지 URL")


# --- API Schemas ---
class EducationAreaCreate(SQLModel):
    """
    교육 영역 생성 요청 본문입니다.
    필수 필드 누락은 422가 아니라 400으로 응답해야 하므로, 모든 필드를 선택 사항으로 받고
    필수 여부는 서비스의 verify_fields에서 검사합니다.
    """
    name: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    image: Optional[str] = Field(None, max_length=500)


class EducationAreaRead(EducationAreaBase):
    id: uuid.UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EducationAreaUpdate(SQLModel):
    """부분 업데이트용 스키마입니다. 모든 필드는 선택 사항입니다."""
    name: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    image: Optional[str] = Field(None, max_length=500)
