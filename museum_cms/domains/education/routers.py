# museum_cms/domains/education/routers.py

from fastapi import APIRouter, Depends, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from museum_cms.core import controller
from museum_cms.core import dependencies as deps
from . import schemas, crud


router = APIRouter(
    tags=["Education Areas (교육 영역 관리)"],
    dependencies=[Depends(deps.get_current_subject)],
    responses={404: {"description": "Not found"}},
)


@router.post(
    "",
    response_model=schemas.EducationAreaRead,
    status_code=status.HTTP_201_CREATED,
    summary="교육 영역 생성",
)
async def create_education_area(
    area_in: schemas.EducationAreaCreate,
    session: AsyncSession = Depends(deps.get_db_session),
):
    """
    새로운 교육 영역을 생성합니다.
    - 필수 필드(name, description)가 없으면 400
    - 같은 이름의 교육 영역이 이미 있으면 403
    """
    return await controller.create_resource(session, crud.education_area, area_in)


@router.patch("/{area_id}", response_model=schemas.EducationAreaRead, summary="교육 영역 수정")
async def update_education_area(
    area_id: str,
    area_in: schemas.EducationAreaUpdate,
    session: AsyncSession = Depends(deps.get_db_session),
):
    """교육 영역을 부분 수정합니다. 값이 있는 필드만 반영됩니다."""
    return await controller.update_resource(session, crud.education_area, area_id, area_in)


@router.delete("/{area_id}", status_code=status.HTTP_204_NO_CONTENT, summary="교육 영역 삭제")
async def delete_education_area(
    area_id: str,
    session: AsyncSession = Depends(deps.get_db_session),
):
    await controller.remove_resource(session, crud.education_area, area_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
