# museum_cms/domains/exhibition/models.py

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import Column, TIMESTAMP, func
from sqlmodel import Field, SQLModel


class ExhibitionRoom(SQLModel, table=True):
    """
    exhibition_rooms 테이블 모델입니다.
    room_code(전시실 코드)는 고유합니다.
    """
    __tablename__ = "exhibition_rooms"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, description="고유 ID")
    room_code: str = Field(index=True, unique=True, max_length=20, description="전시실 코드 (예: A-101)")
    name: str = Field(max_length=100, description="전시실 이름")
    description: str = Field(description="전시실 설명")
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
