# museum_cms/domains/recommendation/__init__.py

"""
'recommendation' 도메인 패키지입니다.

관람객에게 제안하는 활동(추천)을 관리합니다. 제목(title)은 중복될 수 없습니다.
"""

__all__ = ["models", "schemas", "routers", "crud"]
