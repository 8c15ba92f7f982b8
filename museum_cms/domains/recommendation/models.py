# museum_cms/domains/recommendation/models.py

import uuid
from datetime import datetime
from typing import List, Optional

from sqlalchemy import Column, JSON, TIMESTAMP, func
from sqlmodel import Field, SQLModel


class Recommendation(SQLModel, table=True):
    """
    recommendations 테이블 모델입니다.
    관람객에게 제안하는 활동으로, 설명(description)과 단계(steps)는 문단 목록(JSON 배열)으로 저장합니다.
    """
    __tablename__ = "recommendations"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, description="고유 ID")
    title: str = Field(index=True, max_length=200, sa_column_kwargs={"unique": True}, description="추천 활동 제목")
    description: List[str] = Field(sa_column=Column(JSON, nullable=False), description="설명 문단 목록")
    steps: List[str] = Field(sa_column=Column(JSON, nullable=False), description="진행 단계 목록")
    source: str = Field(max_length=500, description="출처")
    image: str = Field(max_length=500, description="대표 이미지 URL")

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
