"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from community.application.usecase.post import (
    GetActivePostResponse,
    GetActivePostUseCase,
)

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


@router.get("/single", response_model=GetActivePostResponse)
async def get_single_post(
    get_active_post_use_case: FromDishka[GetActivePostUseCase],
) -> GetActivePostResponse:
    """Get the discussion post.

    The post is created with default content on the first request.
    """
    return await get_active_post_use_case.execute()
