# museum_cms/__init__.py

"""
Museum CMS FastAPI 애플리케이션의 메인 패키지입니다.

박물관 교육 콘텐츠(교육 영역, 추천 활동, 전시실)를 관리하는 REST 백엔드로,
애플리케이션 진입점(main.py), 공통 설정/DB/보안 유틸리티를 담는 core 서브패키지,
그리고 각 리소스를 대표하는 domains 서브패키지로 구성됩니다.
"""

APP_NAME = "Museum CMS API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api/v1"  # API 라우트의 공통 접두사 (main.py에서 적용)

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Museum / education content management REST backend."
__all__ = []
