from typing import Annotated

from fastapi import Path
from pydantic import BaseModel, ConfigDict, Field, StrictInt
from datetime import datetime

# Ids are SERIAL (int4) columns; larger values never reach the driver.
MAX_ROW_ID = 2**31 - 1

RowId = Annotated[int, Path(ge=1, le=MAX_ROW_ID)]


# --- Topic ---

class TopicResponse(BaseModel):
    slug: str
    description: str
    model_config = ConfigDict(from_attributes=True)


class TopicList(BaseModel):
    topics: list[TopicResponse]


# --- User ---

class UserResponse(BaseModel):
    username: str
    name: str
    avatar_url: str
    model_config = ConfigDict(from_attributes=True)


class UserList(BaseModel):
    users: list[UserResponse]


class UserEnvelope(BaseModel):
    user: UserResponse


# --- Article ---

class ArticleSummary(BaseModel):
    """List view: every column except ``body``, plus the comment count."""
    article_id: int
    title: str
    topic: str
    author: str
    created_at: datetime
    votes: int
    article_img_url: str
    comment_count: int = 0
    model_config = ConfigDict(from_attributes=True)


class ArticleResponse(BaseModel):
    article_id: int
    title: str
    topic: str
    author: str
    body: str
    created_at: datetime
    votes: int
    article_img_url: str
    comment_count: int | None = None
    model_config = ConfigDict(from_attributes=True)


class ArticleList(BaseModel):
    articles: list[ArticleSummary]


class ArticleEnvelope(BaseModel):
    article: ArticleResponse


class ArticleVoteUpdate(BaseModel):
    inc_votes: StrictInt


# --- Comment ---

class CommentCreate(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    body: str = Field(min_length=1)


class CommentResponse(BaseModel):
    comment_id: int
    article_id: int
    author: str
    body: str
    votes: int
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class CommentList(BaseModel):
    comments: list[CommentResponse]


class CommentEnvelope(BaseModel):
    comment: CommentResponse
