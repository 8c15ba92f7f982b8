# museum_cms/domains/recommendation/schemas.py

import uuid
from datetime import datetime
from typing import List, Optional

from sqlmodel import SQLModel, Field


class RecommendationBase(SQLModel):
    title: str = Field(..., max_length=200, description="추천 활동 제목")
    description: List[str] = Field(..., description="설명 문단 목록")
    steps: List[str] = Field(..., description="진행 단계 목록")
    source: str = Field(..., max_length=500, description="출처")
    image: str = Field(..., max_length=500, description="대표 이미지 URL")


# --- API Schemas ---
class RecommendationCreate(SQLModel):
    # 누락 검사는 서비스(verify_fields)에서 400으로 처리합니다.
    title: Optional[str] = Field(None, max_length=200)
    description: Optional[List[str]] = None
    steps: Optional[List[str]] = None
    source: Optional[str] = Field(None, max_length=500)
    image: Optional[str] = Field(None, max_length=500)


class RecommendationRead(RecommendationBase):
    id: uuid.UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RecommendationUpdate(SQLModel):
    title: Optional[str] = Field(None, max_length=200)
    description: Optional[List[str]] = None
    steps: Optional[List[str]] = None
    source: Optional[str] = Field(None, max_length=500)
    image: Optional[str] = Field(None, max_length=500)
