# tests/test_main.py

"""
애플리케이션 공통 엔드포인트에 대한 통합 테스트입니다.

- 루트 경로 (`/`) 응답
- 데이터베이스 헬스 체크 (`/health-check`)
- 요청 본문 파싱 실패 시 400 응답
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_read_root(client: AsyncClient):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to Museum CMS API. Visit /docs for interactive API documentation."}


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    response = await client.get("/health-check")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database_connection": "successful"}


@pytest.mark.asyncio
async def test_health_check_reports_broken_storage(broken_storage_client: AsyncClient):
    response = await broken_storage_client.get("/health-check")
    assert response.status_code == 500
    assert response.json() == {"detail": "Database health check failed."}


@pytest.mark.asyncio
async def test_malformed_body_is_bad_request(authorized_client: AsyncClient):
    """스키마 파싱 실패(잘못된 타입, 깨진 JSON)는 422 대신 400으로 응답합니다."""
    response = await authorized_client.post(
        "/api/v1/recommendations", json={"title": "Stars", "steps": "not-a-list"}
    )
    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid request."}

    response = await authorized_client.post(
        "/api/v1/education-areas",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
