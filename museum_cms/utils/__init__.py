# museum_cms/utils/__init__.py

"""
애플리케이션 전반에서 쓰는 작은 헬퍼 함수 모음입니다.

- `ids.py`: 저장소 식별자(UUID) 형식 검사.
"""
