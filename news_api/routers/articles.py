from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from news_api.database import get_db
from news_api.schemas import (
    ArticleEnvelope,
    ArticleList,
    ArticleVoteUpdate,
    CommentCreate,
    CommentEnvelope,
    CommentList,
    RowId,
)
from news_api.services import article_service, comment_service

router = APIRouter(prefix="/api/articles", tags=["articles"])

@router.get("", response_model=ArticleList)
async def get_articles(
    topic: str | None = Query(None, description="Only return articles with this topic slug."),
    db: AsyncSession = Depends(get_db),
):
    return {"articles": await article_service.get_articles(db, topic=topic)}

@router.get("/{article_id}", response_model=ArticleEnvelope)
async def get_article_by_id(article_id: RowId, db: AsyncSession = Depends(get_db)):
    return {"article": await article_service.get_article(db, article_id)}

@router.patch("/{article_id}", response_model=ArticleEnvelope, response_model_exclude_none=True)
async def patch_article_votes(
    article_id: RowId, data: ArticleVoteUpdate, db: AsyncSession = Depends(get_db)
):
    article = await article_service.update_article_votes(db, article_id, data.inc_votes)
    return {"article": article}

@router.get("/{article_id}/comments", response_model=CommentList)
async def get_article_comments(article_id: RowId, db: AsyncSession = Depends(get_db)):
    return {"comments": await comment_service.get_comments_for_article(db, article_id)}

@router.post("/{article_id}/comments", status_code=201, response_model=CommentEnvelope)
async def post_article_comment(
    article_id: RowId, data: CommentCreate, db: AsyncSession = Depends(get_db)
):
    comment = await comment_service.add_comment(db, article_id, data.username, data.body)
    return {"comment": comment}
