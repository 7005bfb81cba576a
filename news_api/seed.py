"""
Load topics, users, articles and comments into empty tables.

*data* is a mapping with the keys ``topics``, ``users``, ``articles`` and
``comments``, each a list of plain dicts whose keys are column names.
Comments name their article by ``article_title`` because article ids are
assigned by the database on insert.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from news_api.models import Article, Comment, Topic, User

logger = logging.getLogger(__name__)


async def seed(session: AsyncSession, data: dict) -> None:
    session.add_all(Topic(**t) for t in data.get("topics", []))
    session.add_all(User(**u) for u in data.get("users", []))
    await session.flush()

    articles = [Article(**a) for a in data.get("articles", [])]
    session.add_all(articles)
    await session.flush()
    article_ids = {a.title: a.article_id for a in articles}

    comments = []
    for c in data.get("comments", []):
        fields = dict(c)
        title = fields.pop("article_title")
        comments.append(Comment(article_id=article_ids[title], **fields))
    session.add_all(comments)
    await session.flush()

    logger.info(
        "Seeded %d topics, %d users, %d articles, %d comments",
        len(data.get("topics", [])), len(data.get("users", [])), len(articles), len(comments),
    )
