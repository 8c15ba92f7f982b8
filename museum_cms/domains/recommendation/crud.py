# museum_cms/domains/recommendation/crud.py

from museum_cms.core.crud_base import CRUDBase
from . import models, schemas


class CRUDRecommendation(CRUDBase[models.Recommendation, schemas.RecommendationCreate, schemas.RecommendationUpdate]):
    pass


recommendation = CRUDRecommendation(
    models.Recommendation,
    unique_field="title",
    required_fields=("title", "description", "steps", "source", "image"),
    updatable_fields=("title", "description", "steps", "source", "image"),
    label="Recommendation",
    duplicate_message="Recommendation with indicated title already exists.",
)
