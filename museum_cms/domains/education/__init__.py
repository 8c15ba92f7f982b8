# museum_cms/domains/education/__init__.py

"""
'education' 도메인 패키지입니다.

박물관 교육 프로그램을 분류하는 교육 영역(EducationArea)을 관리합니다.
교육 영역의 이름(name)은 중복될 수 없습니다.

주요 서브모듈:
- `models.py`: education_areas 테이블 SQLModel 정의.
- `schemas.py`: 요청/응답 스키마.
- `crud.py`: 공통 CRUDBase에 리소스 기술자를 채운 서비스 인스턴스.
- `routers.py`: 토큰 인증이 필요한 생성/수정/삭제 엔드포인트.
"""

__all__ = ["models", "schemas", "routers", "crud"]
