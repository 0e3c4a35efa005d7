"""Awareness article routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from guard.application.usecase.article import (
    ListArticlesResponse,
    ListArticlesUseCase,
)

router = APIRouter(prefix="/api/articles", tags=["articles"], route_class=DishkaRoute)


@router.get("", response_model=ListArticlesResponse)
async def list_articles(
    list_articles_use_case: FromDishka[ListArticlesUseCase],
) -> ListArticlesResponse:
    """List awareness articles, newest first."""
    return await list_articles_use_case.execute()
