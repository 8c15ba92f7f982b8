# museum_cms/domains/recommendation/routers.py

from fastapi import APIRouter, Depends, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from museum_cms.core import controller
from museum_cms.core import dependencies as deps
from . import schemas, crud


router = APIRouter(
    tags=["Recommendations (추천 활동 관리)"],
    dependencies=[Depends(deps.get_current_subject)],
    responses={404: {"description": "Not found"}},
)


@router.post(
    "",
    response_model=schemas.RecommendationRead,
    status_code=status.HTTP_201_CREATED,
    summary="추천 활동 생성",
)
async def create_recommendation(
    recommendation_in: schemas.RecommendationCreate,
    session: AsyncSession = Depends(deps.get_db_session),
):
    """
    새로운 추천 활동을 생성합니다.
    title, description, steps, source, image 모두 필수이며 title은 중복될 수 없습니다.
    """
    return await controller.create_resource(session, crud.recommendation, recommendation_in)


@router.patch("/{recommendation_id}", response_model=schemas.RecommendationRead, summary="추천 활동 수정")
async def update_recommendation(
    recommendation_id: str,
    recommendation_in: schemas.RecommendationUpdate,
    session: AsyncSession = Depends(deps.get_db_session),
):
    return await controller.update_resource(session, crud.recommendation, recommendation_id, recommendation_in)


@router.delete("/{recommendation_id}", status_code=status.HTTP_204_NO_CONTENT, summary="추천 활동 삭제")
async def delete_recommendation(
    recommendation_id: str,
    session: AsyncSession = Depends(deps.get_db_session),
):
    await controller.remove_resource(session, crud.recommendation, recommendation_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
