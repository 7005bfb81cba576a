"""
Test infrastructure for the News API.

Strategy
--------
- SQLite in-memory via aiosqlite eliminates the need for a running Postgres
  instance in CI, keeping the suite fast and self-contained.
- StaticPool forces all async tasks to share the same in-memory database
  connection, which is required because SQLite in-memory databases are
  connection-scoped; a new connection would see an empty database.
- Each test gets its own ``Database`` handle and app instance built with
  ``create_app(database)``.  ASGITransport does not run the lifespan, so the
  fixture opens and closes the handle itself.
- Tables are created and seeded with ``TEST_DATA`` before each test and
  dropped after.  Fresh tables mean article ids follow the order of
  ``TEST_DATA["articles"]`` (1-based) and comment ids the order of
  ``TEST_DATA["comments"]``.
"""
from datetime import datetime, timezone

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool

from news_api.database import Database
from news_api.main import create_app
from news_api.seed import seed

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def _ts(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

TEST_DATA = {
    "topics": [
        {"slug": "mitch", "description": "The man, the Mitch, the legend"},
        {"slug": "cats", "description": "Not dogs"},
        {"slug": "paper", "description": "what books are made of"},
    ],
    "users": [
        {"username": "butter_bridge", "name": "jonny",
         "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg"},
        {"username": "icellusedkars", "name": "sam",
         "avatar_url": "https://avatars2.githubusercontent.com/u/24604688?s=460&v=4"},
        {"username": "rogersop", "name": "paul",
         "avatar_url": "https://avatars2.githubusercontent.com/u/24394918?s=400&v=4"},
        {"username": "lurker", "name": "do_nothing",
         "avatar_url": "https://www.golenbock.com/wp-content/uploads/2015/01/placeholder-user.png"},
    ],
    "articles": [
        # article_id 1
        {"title": "Living in the shadow of a great man", "topic": "mitch", "author": "butter_bridge",
         "body": "I find this existence challenging", "created_at": _ts(2020, 7, 9, 20, 11),
         "votes": 100,
         "article_img_url": "https://images.pexels.com/photos/158651/news-newsletter-newspaper-information-158651.jpeg?w=700&h=700"},
        # article_id 2
        {"title": "Sony Vaio; or, The Laptop", "topic": "mitch", "author": "icellusedkars",
         "body": "Call me Mitchell.", "created_at": _ts(2020, 10, 16, 5, 3),
         "votes": 0,
         "article_img_url": "https://images.pexels.com/photos/158651/news-newsletter-newspaper-information-158651.jpeg?w=700&h=700"},
        # article_id 3
        {"title": "Eight pug gifs that remind me of mitch", "topic": "mitch", "author": "icellusedkars",
         "body": "some gifs", "created_at": _ts(2020, 11, 3, 9, 12),
         "votes": 0,
         "article_img_url": "https://images.pexels.com/photos/158651/news-newsletter-newspaper-information-158651.jpeg?w=700&h=700"},
        # article_id 4
        {"title": "Student SUES Mitch!", "topic": "mitch", "author": "rogersop",
         "body": "We all love Mitch and his wonderful, unique typing style.", "created_at": _ts(2020, 5, 6, 1, 14),
         "votes": 0,
         "article_img_url": "https://images.pexels.com/photos/158651/news-newsletter-newspaper-information-158651.jpeg?w=700&h=700"},
        # article_id 5
        {"title": "UNCOVERED: catspiracy to bring down democracy", "topic": "cats", "author": "rogersop",
         "body": "Bastet walks amongst us, and the cats are taking arms!", "created_at": _ts(2020, 8, 3, 13, 14),
         "votes": 0,
         "article_img_url": "https://images.pexels.com/photos/158651/news-newsletter-newspaper-information-158651.jpeg?w=700&h=700"},
    ],
    "comments": [
        # comment_id 1
        {"article_title": "Living in the shadow of a great man", "author": "butter_bridge",
         "body": "Oh, I've got compassion running out of my nose, pal!", "votes": 16,
         "created_at": _ts(2020, 4, 6, 12, 17)},
        # comment_id 2
        {"article_title": "Living in the shadow of a great man", "author": "icellusedkars",
         "body": "Replacing the quiet elegance of the dark suit and tie with the casual indifference of these muted earth tones is a form of fashion suicide, but, uh, call me crazy.",
         "votes": 100, "created_at": _ts(2020, 3, 1, 1, 13)},
        # comment_id 3
        {"article_title": "Living in the shadow of a great man", "author": "icellusedkars",
         "body": "Lobster pot", "votes": 0, "created_at": _ts(2020, 5, 15, 20, 19)},
        # comment_id 4
        {"article_title": "Eight pug gifs that remind me of mitch", "author": "butter_bridge",
         "body": "git push origin master", "votes": 0, "created_at": _ts(2020, 6, 20, 7, 24)},
        # comment_id 5
        {"article_title": "Eight pug gifs that remind me of mitch", "author": "rogersop",
         "body": "Ambidextrous marsupial", "votes": 0, "created_at": _ts(2020, 9, 19, 23, 10)},
        # comment_id 6
        {"article_title": "UNCOVERED: catspiracy to bring down democracy", "author": "butter_bridge",
         "body": "This is a bad article name", "votes": 1, "created_at": _ts(2020, 8, 4, 10, 0)},
    ],
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def database():
    """Open a fresh in-memory database, create and seed the tables."""
    db = Database(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await db.connect()
    await db.create_all()
    async with db.session() as session:
        await seed(session, TEST_DATA)
        await session.commit()
    yield db
    await db.drop_all()
    await db.disconnect()


@pytest_asyncio.fixture
async def db_session(database) -> AsyncSession:
    """
    Yield a live AsyncSession for tests that call service functions
    directly or assert on stored rows.
    """
    async with database.session() as session:
        yield session


@pytest_asyncio.fixture
async def app(database):
    return create_app(database)


@pytest_asyncio.fixture
async def async_client(app) -> AsyncClient:
    """Yield an httpx.AsyncClient wired to the FastAPI app via ASGITransport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
