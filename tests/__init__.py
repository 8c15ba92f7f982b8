# tests/__init__.py

"""
Museum CMS API 테스트 스위트 패키지입니다.

- `conftest.py`: 인메모리 SQLite 엔진, 세션 의존성 오버라이드, 인증 클라이언트 등 공용 픽스처.
- `core/`: 토큰 유틸리티, 공통 서비스(CRUDBase) 단위 테스트.
- `domains/`: 리소스별 API 통합 테스트.
"""

__title__ = "Museum CMS API Tests"
__all__ = []
