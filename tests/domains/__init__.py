# tests/domains/__init__.py

"""
리소스(도메인)별 API 통합 테스트 패키지입니다.

- `test_education.py`: 교육 영역 (/api/v1/education-areas)
- `test_recommendation.py`: 추천 활동 (/api/v1/recommendations)
- `test_exhibition.py`: 전시실 (/api/v1/exhibition-rooms)
"""
