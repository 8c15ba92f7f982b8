# museum_cms/domains/__init__.py

"""
리소스별 도메인 패키지 모음입니다.

- `education/`: 교육 영역
- `recommendation/`: 추천 활동
- `exhibition/`: 전시실
- `models/`: 모든 테이블 모델의 중앙 임포트
"""
