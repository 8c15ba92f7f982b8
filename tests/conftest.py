# tests/conftest.py

import os
from typing import AsyncGenerator, Awaitable, Callable

# 애플리케이션 모듈을 임포트하기 전에 테스트용 설정을 지정합니다.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "museum-cms-test-secret")

import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from museum_cms.main import app as main_app  # noqa: E402
from museum_cms.core import dependencies as deps  # noqa: E402
from museum_cms.core.security import create_token  # noqa: E402

# --- 모든 모델 임포트 ---
# SQLModel.metadata.create_all()이 모든 테이블을 인식하려면 모델이 한 번 이상 임포트되어야 합니다.
from museum_cms.domains.models import EducationArea, Recommendation, ExhibitionRoom  # noqa: E402


# --- 테스트용 데이터베이스 설정 ---
# 테스트마다 새 인메모리 SQLite를 만들고, StaticPool로 하나의 연결을 공유합니다.
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트 함수마다 독립된 데이터베이스의 비동기 세션을 제공합니다."""
    async with AsyncSession(test_engine, expire_on_commit=False) as session:
        yield session


# --- 비동기 테스트 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    인증되지 않은 AsyncClient를 생성하고, 테스트용 비동기 DB 세션을 주입합니다.
    """
    def override_get_session():
        yield db_session

    original_overrides = main_app.dependency_overrides.copy()
    try:
        main_app.dependency_overrides[deps.get_db_session] = override_get_session
        async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as async_client:
            yield async_client
    finally:
        # 클라이언트 픽스처가 끝나면 오버라이드를 반드시 복원해야 합니다.
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)


@pytest_asyncio.fixture(scope="function")
async def authorized_client(client: AsyncClient) -> AsyncGenerator[AsyncClient, None]:
    """유효한 Bearer 토큰이 헤더에 설정된 클라이언트를 반환합니다."""
    client.headers["Authorization"] = f"Bearer {create_token('curator-1')}"
    yield client


# --- 도메인별 데이터 팩토리 ---
@pytest_asyncio.fixture(scope="function")
def education_area_factory(db_session: AsyncSession) -> Callable[..., Awaitable[EducationArea]]:
    async def _create(name: str = "Physics", description: str = "Forces and motion", **kwargs) -> EducationArea:
        area = EducationArea(name=name, description=description, **kwargs)
        db_session.add(area)
        await db_session.commit()
        await db_session.refresh(area)
        return area
    return _create


@pytest_asyncio.fixture(scope="function")
def recommendation_factory(db_session: AsyncSession) -> Callable[..., Awaitable[Recommendation]]:
    async def _create(title: str = "Build a paper rocket", **kwargs) -> Recommendation:
        data = {
            "description": ["Use recycled paper.", "Works best outdoors."],
            "steps": ["Roll the tube.", "Attach the fins.", "Launch."],
            "source": "Science education team",
            "image": "https://cdn.example.org/rocket.png",
            **kwargs,
        }
        recommendation = Recommendation(title=title, **data)
        db_session.add(recommendation)
        await db_session.commit()
        await db_session.refresh(recommendation)
        return recommendation
    return _create


@pytest_asyncio.fixture(scope="function")
def exhibition_room_factory(db_session: AsyncSession) -> Callable[..., Awaitable[ExhibitionRoom]]:
    async def _create(room_code: str = "A-101", name: str = "Dinosaur Hall", **kwargs) -> ExhibitionRoom:
        kwargs.setdefault("description", "Fossils from the Jurassic period")
        room = ExhibitionRoom(room_code=room_code, name=name, **kwargs)
        db_session.add(room)
        await db_session.commit()
        await db_session.refresh(room)
        return room
    return _create


class BrokenSession:
    """모든 쿼리에서 연결 오류를 일으키는 가짜 세션 (500 경로 테스트용)."""

    async def exec(self, statement, *args, **kwargs):
        raise ConnectionError("database is unreachable")


@pytest_asyncio.fixture(scope="function")
async def broken_storage_client() -> AsyncGenerator[AsyncClient, None]:
    """저장소 연결이 끊긴 상황을 흉내 내는 인증된 클라이언트입니다."""
    broken = BrokenSession()

    def override_get_session():
        yield broken

    original_overrides = main_app.dependency_overrides.copy()
    try:
        main_app.dependency_overrides[deps.get_db_session] = override_get_session
        async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as async_client:
            async_client.headers["Authorization"] = f"Bearer {create_token('curator-1')}"
            yield async_client
    finally:
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)
