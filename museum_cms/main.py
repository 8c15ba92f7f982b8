# museum_cms/main.py

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import FastAPI, Depends, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from museum_cms import API_PREFIX
from museum_cms.core.config import settings
from museum_cms.core.database import engine, create_db_and_tables
from museum_cms.core.dependencies import get_db_session
from museum_cms.core.logging_config import setup_logging
from museum_cms.core.security import warn_if_default_secret

# create_all이 모든 테이블을 인식하도록 모델을 먼저 임포트합니다.
from museum_cms.domains import models  # noqa: F401
from museum_cms.domains.education.routers import router as education_router
from museum_cms.domains.recommendation.routers import router as recommendation_router
from museum_cms.domains.exhibition.routers import router as exhibition_router

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    시작 시 테이블을 준비하고, 종료 시 데이터베이스 연결 풀을 정리합니다.
    """
    logger.info("Starting %s (%s)", settings.APP_NAME, settings.APP_ENV)
    warn_if_default_secret()
    await create_db_and_tables()

    yield  # 애플리케이션 실행

    logger.info("Shutting down %s", settings.APP_NAME)
    await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# -- CORS 미들웨어 설정 --
# 프로덕션에서는 allow_origins를 실제 프론트엔드 도메인으로 제한해야 합니다.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -- 요청 본문 파싱 실패는 모두 400으로 응답합니다 (기본값 422 대신) --
@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request."},
    )


# -- 도메인 라우터 포함 --
app.include_router(education_router, prefix=f"{API_PREFIX}/education-areas")
app.include_router(recommendation_router, prefix=f"{API_PREFIX}/recommendations")
app.include_router(exhibition_router, prefix=f"{API_PREFIX}/exhibition-rooms")


@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    return {"message": "Welcome to Museum CMS API. Visit /docs for interactive API documentation."}


@app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(get_db_session)):
    """
    데이터베이스에 가벼운 쿼리를 실행하여 서비스의 정상 작동 여부를 확인합니다.
    """
    try:
        result = await session.exec(select(1))
        if result.first():
            return {"status": "ok", "database_connection": "successful"}
    except Exception:
        logger.exception("Database health check failed")
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Database health check failed.",
    )
