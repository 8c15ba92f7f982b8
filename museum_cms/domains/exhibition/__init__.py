# museum_cms/domains/exhibition/__init__.py

"""
'exhibition' 도메인 패키지입니다.

박물관 전시실(ExhibitionRoom)을 관리합니다. 전시실 코드(room_code)는 중복될 수 없으며,
조회 엔드포인트는 인증 없이 공개됩니다.
"""

__all__ = ["models", "schemas", "routers", "crud"]
