# museum_cms/core/security.py

"""
인증 토큰 관련 유틸리티 및 의존성 주입을 정의하는 모듈입니다.

- JWT(JSON Web Token) 발급 (create_token) 및 검증 (verify_token).
- HTTP Bearer 스키마를 사용하여 요청한 주체(subject) 식별.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt, JWTError
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from museum_cms.core.config import settings

logger = logging.getLogger(__name__)

# auto_error=False: 헤더가 없을 때 403 대신 아래에서 401을 직접 반환합니다.
bearer_scheme = HTTPBearer(auto_error=False)


# --- JWT 토큰 생성 및 검증 ---
def create_token(subject_id: Any, expires_delta: Optional[timedelta] = None) -> str:
    """
    주체 식별자(subject_id)만을 클레임으로 담는 서명된 토큰을 생성합니다.
    만료 시간은 기본적으로 settings.TOKEN_EXPIRE_HOURS (24시간) 입니다.
    """
    if expires_delta is None:
        expires_delta = timedelta(hours=settings.TOKEN_EXPIRE_HOURS)
    expire = datetime.now(timezone.utc) + expires_delta
    # jose는 'sub' 클레임이 문자열이어야 합니다.
    to_encode = {"sub": str(subject_id), "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY.get_secret_value(), algorithm=settings.ALGORITHM)


def verify_token(token: Optional[str]) -> Optional[Dict[str, Any]]:
    """
    토큰의 서명과 만료 시간을 검증하고 디코딩된 클레임을 반환합니다.
    exp 클레임이 없는 토큰은 거부합니다.
    서명 불일치, 만료, 형식 오류 등 어떤 실패든 예외 대신 None을 반환합니다.
    """
    if not token or not isinstance(token, str):
        return None
    try:
        return jwt.decode(
            token,
            settings.SECRET_KEY.get_secret_value(),
            algorithms=[settings.ALGORITHM],
            options={"require_exp": True},
        )
    except JWTError as e:
        logger.debug("Token rejected: %s", e)
        return None


async def get_current_subject(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """
    Authorization 헤더의 Bearer 토큰을 검증하고 주체 식별자를 반환합니다.
    토큰이 없거나 유효하지 않으면 401 Unauthorized를 발생시킵니다.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise credentials_exception

    payload = verify_token(credentials.credentials)
    if not payload or payload.get("sub") is None:
        raise credentials_exception
    return payload["sub"]


def warn_if_default_secret() -> None:
    if settings.uses_default_secret:
        logger.warning(
            "SECRET_KEY is not set; tokens are signed with the built-in default key. "
            "Set SECRET_KEY in the environment before deploying."
        )
