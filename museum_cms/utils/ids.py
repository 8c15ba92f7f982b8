# museum_cms/utils/ids.py

"""
저장소 식별자(UUID) 형식 검사 유틸리티입니다.
"""

import uuid
from typing import Any, Optional


def parse_id(value: Any) -> Optional[uuid.UUID]:
    """문자열을 UUID로 변환합니다. 형식이 올바르지 않으면 None."""
    if isinstance(value, uuid.UUID):
        return value
    if not isinstance(value, str):
        return None
    try:
        return uuid.UUID(value)
    except ValueError:
        return None


def is_valid_id(value: Any) -> bool:
    return parse_id(value) is not None
