# museum_cms/domains/exhibition/schemas.py

import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field


class ExhibitionRoomBase(SQLModel):
    room_code: str = Field(..., max_length=20, description="전시실 코드")
    name: str = Field(..., max_length=100, description="전시실 이름")
    description: str = Field(..., description="전시실 설명")
    image: Optional[str] = Field(None, max_length=500, description="대표 이미지 URL")


# --- API Schemas ---
class ExhibitionRoomCreate(SQLModel):
    room_code: Optional[str] = Field(None, max_length=20)
    name: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    image: Optional[str] = Field(None, max_length=500)


class ExhibitionRoomRead(ExhibitionRoomBase):
    id: uuid.UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ExhibitionRoomUpdate(SQLModel):
    room_code: Optional[str] = Field(None, max_length=20)
    name: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    image: Optional[str] = Field(None, max_length=500)
