# museum_cms/domains/exhibition/routers.py

from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from museum_cms.core import controller
from museum_cms.core import dependencies as deps
from . import schemas, crud


router = APIRouter(
    tags=["Exhibition Rooms (전시실 관리)"],
    responses={404: {"description": "Not found"}},
)

# 조회는 공개, 생성/수정/삭제는 토큰 인증이 필요합니다.
protected = [Depends(deps.get_current_subject)]


@router.get(
    "",
    response_model=Union[List[schemas.ExhibitionRoomRead], schemas.ExhibitionRoomRead],
    summary="전시실 조회",
)
async def find_exhibition_rooms(
    room_code: Optional[str] = Query(None, description="지정하면 해당 코드의 전시실 한 건만 조회"),
    session: AsyncSession = Depends(deps.get_db_session),
):
    """
    room_code가 있으면 해당 전시실을, 없으면 전체 전시실 목록을 반환합니다.
    대상이 없거나 목록이 비어 있으면 404를 반환합니다.
    """
    return await controller.find_resources(session, crud.exhibition_room, room_code)


@router.post(
    "",
    response_model=schemas.ExhibitionRoomRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=protected,
    summary="전시실 생성",
)
async def create_exhibition_room(
    room_in: schemas.ExhibitionRoomCreate,
    session: AsyncSession = Depends(deps.get_db_session),
):
    return await controller.create_resource(session, crud.exhibition_room, room_in)


@router.patch(
    "/{room_id}",
    response_model=schemas.ExhibitionRoomRead,
    dependencies=protected,
    summary="전시실 수정",
)
async def update_exhibition_room(
    room_id: str,
    room_in: schemas.ExhibitionRoomUpdate,
    session: AsyncSession = Depends(deps.get_db_session),
):
    return await controller.update_resource(session, crud.exhibition_room, room_id, room_in)


@router.delete(
    "/{room_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=protected,
    summary="전시실 삭제",
)
async def delete_exhibition_room(
    room_id: str,
    session: AsyncSession = Depends(deps.get_db_session),
):
    await controller.remove_resource(session, crud.exhibition_room, room_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
