# museum_cms/domains/exhibition/crud.py

from museum_cms.core.crud_base import CRUDBase
from . import models, schemas


class CRUDExhibitionRoom(CRUDBase[models.ExhibitionRoom, schemas.ExhibitionRoomCreate, schemas.ExhibitionRoomUpdate]):
    pass


exhibition_room = CRUDExhibitionRoom(
    models.ExhibitionRoom,
    unique_field="room_code",
    required_fields=("room_code", "name", "description"),
    updatable_fields=("room_code", "name", "description", "image"),
    label="Exhibition room",
    duplicate_message="Specified room code has already been used.",
)
