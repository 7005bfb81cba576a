"""
Article service: queries for the articles table.

Design notes
------------
- ``comment_count`` is never stored.  It is computed with a LEFT OUTER JOIN
  on comments and ``COUNT(comments.comment_id)``, so articles without
  comments report 0 rather than disappearing from the result.
- The GROUP BY lists every selected article column, which keeps the query
  valid on PostgreSQL as well as on SQLite.
- Lists are ordered by ``created_at DESC`` with ``article_id DESC`` as the
  tie-breaker so the order is total.
- Vote increments are evaluated by the database (``votes = votes + :inc``);
  concurrent increments are serialized by the store's row locks.
"""
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.errors import NotFound
from news_api.models import Article, Comment
from news_api.services import topic_service

logger = logging.getLogger(__name__)

# Columns returned by the list view; ``body`` is omitted.
_SUMMARY_COLUMNS = (
    Article.article_id,
    Article.title,
    Article.topic,
    Article.author,
    Article.created_at,
    Article.votes,
    Article.article_img_url,
)

_DETAIL_COLUMNS = _SUMMARY_COLUMNS + (Article.body,)


def _comment_count():
    return func.count(Comment.comment_id).label("comment_count")


# ---------------------------------------------------------------------------
# Serialisation helpers
# ---------------------------------------------------------------------------

def _row_to_dict(row) -> dict:
    """Serialise a result row (column name -> value) to a plain dict."""
    data = dict(row._mapping)
    if "comment_count" in data:
        data["comment_count"] = int(data["comment_count"] or 0)
    return data


def _article_to_dict(article: Article) -> dict:
    return {
        "article_id": article.article_id,
        "title": article.title,
        "topic": article.topic,
        "author": article.author,
        "body": article.body,
        "created_at": article.created_at,
        "votes": article.votes,
        "article_img_url": article.article_img_url,
    }


# ---------------------------------------------------------------------------
# Public service functions
# ---------------------------------------------------------------------------

async def get_article(db: AsyncSession, article_id: int) -> dict:
    """
    Return every column of *article_id* plus its ``comment_count``.

    Raises ``NotFound("page not found")`` when no row matches.
    """
    q = (
        select(*_DETAIL_COLUMNS, _comment_count())
        .outerjoin(Comment, Comment.article_id == Article.article_id)
        .where(Article.article_id == article_id)
        .group_by(*_DETAIL_COLUMNS)
    )
    row = (await db.execute(q)).one_or_none()
    if row is None:
        raise NotFound("page not found")
    return _row_to_dict(row)


async def get_articles(db: AsyncSession, topic: str | None = None) -> list[dict]:
    """
    Return all articles (without body) with their comment counts, newest
    first.

    When *topic* is given, only that topic's articles are returned.  An
    unknown topic raises ``NotFound("not found")``; a known topic with no
    articles yields an empty list.
    """
    if topic is not None and not await topic_service.topic_exists(db, topic):
        raise NotFound("not found")

    q = (
        select(*_SUMMARY_COLUMNS, _comment_count())
        .outerjoin(Comment, Comment.article_id == Article.article_id)
        .group_by(*_SUMMARY_COLUMNS)
        .order_by(Article.created_at.desc(), Article.article_id.desc())
    )
    if topic is not None:
        q = q.where(Article.topic == topic)

    result = await db.execute(q)
    return [_row_to_dict(row) for row in result.all()]


async def update_article_votes(db: AsyncSession, article_id: int, inc_votes: int) -> dict:
    """
    Add *inc_votes* (possibly negative) to the article's vote total and
    return the updated row.

    Raises ``NotFound("not found")`` when the article does not exist.
    """
    article = await db.get(Article, article_id)
    if article is None:
        raise NotFound("not found")

    article.votes = Article.votes + inc_votes
    await db.flush()
    await db.refresh(article)
    logger.debug("Article %d votes now %d", article_id, article.votes)
    return _article_to_dict(article)
