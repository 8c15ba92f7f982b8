# museum_cms/domains/education/models.py

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import Column, TIMESTAMP, func
from sqlmodel import Field, SQLModel


class EducationArea(SQLModel, table=True):
    """
    education_areas 테이블 모델입니다.
    name은 고유 인덱스를 가지며, 애플리케이션의 중복 검사와 함께 중복을 막습니다.
    """
    __tablename__ = "education_areas"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, description="고유 ID")
    name: str = Field(index=True, unique=True, max_length=100, description="교육 영역 이름")
    description: str = Field(description="교육 영역 설명")
    image: Optional[str] = Field(default=None, max_length=500, description="대표 이미지 URL")

    created_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="생성 일시",
    )
    updated_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()),
        description="최종 수정 일시",
    )
