# museum_cms/domains/models/__init__.py

"""
모든 도메인의 SQLModel 테이블 모델을 한 곳에서 임포트합니다.
SQLModel.metadata가 모든 테이블을 인식하도록 보장합니다 (create_all, 테스트 픽스처).
"""

from museum_cms.domains.education.models import EducationArea
from museum_cms.domains.recommendation.models import Recommendation
from museum_cms.domains.exhibition.models import ExhibitionRoom

__all__ = ["EducationArea", "Recommendation", "ExhibitionRoom"]
