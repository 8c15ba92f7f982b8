# museum_cms/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 모아 둔 모듈입니다.

- 데이터베이스 세션 (get_db_session).
- 토큰으로 인증된 주체 (get_current_subject, security.py에서 정의).
"""

from typing import AsyncGenerator

from sqlmodel.ext.asyncio.session import AsyncSession

from museum_cms.core.database import get_session as get_main_app_session
from museum_cms.core.security import get_current_subject  # noqa: F401


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    museum_cms.core.database.get_session을 래핑한 요청 단위 세션 의존성입니다.
    테스트에서는 이 함수를 dependency_overrides로 교체합니다.
    """
    async for session in get_main_app_session():
        yield session
