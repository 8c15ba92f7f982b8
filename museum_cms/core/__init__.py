# museum_cms/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

- `config.py`: 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 비동기 엔진과 세션 관리 (SQLModel + SQLAlchemy asyncio).
- `logging_config.py`: 루트 로거 설정.
- `security.py`: 토큰 발급/검증과 Bearer 인증 의존성.
- `dependencies.py`: 라우터에서 쓰는 공통 의존성.
- `service_response.py`: 서비스 결과 봉투 (success / content).
- `crud_base.py`: 리소스 공통 검증 및 CRUD 서비스.
- `controller.py`: 검증 → 조회 → 변경 → 상태 코드 매핑 파이프라인.
"""

__all__ = []
