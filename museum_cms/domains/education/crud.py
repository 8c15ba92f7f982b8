# museum_cms/domains/education/crud.py

from museum_cms.core.crud_base import CRUDBase
from . import models, schemas


class CRUDEducationArea(CRUDBase[models.EducationArea, schemas.EducationAreaCreate, schemas.EducationAreaUpdate]):
    pass


education_area = CRUDEducationArea(
    models.EducationArea,
    unique_field="name",
    required_fields=("name", "description"),
    updatable_fields=("name", "description", "image"),
    label="Education area",
    duplicate_message="Education area already exists.",
)
