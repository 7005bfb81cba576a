import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from news_api.config import settings
from news_api.database import Database
from news_api.errors import register_error_handlers
from news_api.logging_config import configure_logging
from news_api.middleware import RequestLoggingMiddleware
from news_api.routers import api, articles, comments, topics, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await app.state.db.connect()
    logger.info("News API started (env=%s)", settings.APP_ENV)
    yield
    # Shutdown
    await app.state.db.disconnect()


def create_app(database: Database | None = None) -> FastAPI:
    """
    Build the application around *database*.

    When no handle is given, one is created from ``settings.DATABASE_URL``;
    it is opened by the lifespan hook, so callers that drive the app without
    a lifespan (tests) must ``connect()`` their handle themselves.
    """
    configure_logging(settings.LOG_LEVEL)

    if database is None:
        database = Database(settings.DATABASE_URL, echo=settings.DEBUG, pool_pre_ping=True)

    app = FastAPI(
        title="News API",
        description="Topics, articles, comments and users of a news aggregator",
        version=settings.API_VERSION,
        lifespan=lifespan,
    )
    app.state.db = database

    # Middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Routers
    app.include_router(api.router)
    app.include_router(topics.router)
    app.include_router(articles.router)
    app.include_router(comments.router)
    app.include_router(users.router)

    @app.get("/health")
    async def health():
        return {"status": "healthy", "version": settings.API_VERSION}

    return app


app = create_app()
