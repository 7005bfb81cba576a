"""
Comment service: listing, creation and deletion of an article's comments.

Comment authors must be existing users.  That reference is enforced by the
foreign key on ``comments.author``; the resulting ``IntegrityError`` is
left to the centralized error handlers.
"""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.errors import BadRequest, NotFound
from news_api.models import Article, Comment

logger = logging.getLogger(__name__)


def _comment_to_dict(comment: Comment) -> dict:
    return {
        "comment_id": comment.comment_id,
        "article_id": comment.article_id,
        "author": comment.author,
        "body": comment.body,
        "votes": comment.votes,
        "created_at": comment.created_at,
    }


async def _article_exists(db: AsyncSession, article_id: int) -> bool:
    result = await db.execute(
        select(Article.article_id).where(Article.article_id == article_id)
    )
    return result.scalar_one_or_none() is not None


async def get_comments_for_article(db: AsyncSession, article_id: int) -> list[dict]:
    """
    Return the comments of *article_id*, newest first.

    Raises ``NotFound("page not found")`` when the article does not exist;
    an existing article without comments yields an empty list.
    """
    if not await _article_exists(db, article_id):
        raise NotFound("page not found")

    q = (
        select(Comment)
        .where(Comment.article_id == article_id)
        .order_by(Comment.created_at.desc(), Comment.comment_id.desc())
    )
    result = await db.execute(q)
    return [_comment_to_dict(c) for c in result.scalars().all()]


async def add_comment(db: AsyncSession, article_id: int, username: str, body: str) -> dict:
    """
    Insert a comment by *username* on *article_id* and return the stored row.

    The new comment starts with zero votes and the current timestamp.
    Raises ``BadRequest`` when the article does not exist.
    """
    if not await _article_exists(db, article_id):
        raise BadRequest("bad request")

    comment = Comment(article_id=article_id, author=username, body=body, votes=0)
    db.add(comment)
    await db.flush()
    # created_at comes from the server default.
    await db.refresh(comment)

    logger.info("Comment %d added to article %d by %s", comment.comment_id, article_id, username)
    return _comment_to_dict(comment)


async def delete_comment(db: AsyncSession, comment_id: int) -> None:
    """Delete *comment_id*, or raise ``NotFound("not found")``."""
    comment = await db.get(Comment, comment_id)
    if comment is None:
        raise NotFound("not found")

    await db.delete(comment)
    await db.flush()
    logger.info("Comment %d deleted", comment_id)
