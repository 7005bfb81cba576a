"""Static description of the public API, served by ``GET /api``."""

ENDPOINTS: dict = {
    "GET /api": {
        "description": "serves up a json representation of all the available endpoints of the api",
    },
    "GET /api/topics": {
        "description": "serves an array of all topics",
        "queries": [],
        "exampleResponse": {
            "topics": [{"slug": "football", "description": "Footie!"}],
        },
    },
    "GET /api/articles": {
        "description": "serves an array of all articles, newest first, each with a comment_count",
        "queries": ["topic"],
        "exampleResponse": {
            "articles": [
                {
                    "article_id": 1,
                    "title": "Seafood substitutions are increasing",
                    "topic": "cooking",
                    "author": "weegembump",
                    "created_at": "2018-05-30T15:59:13.341Z",
                    "votes": 0,
                    "article_img_url": "https://images.pexels.com/photos/158651/news-newsletter-newspaper-information-158651.jpeg?w=700&h=700",
                    "comment_count": 6,
                }
            ]
        },
    },
    "GET /api/articles/:article_id": {
        "description": "serves a single article, including its comment_count",
        "queries": [],
        "exampleResponse": {
            "article": {
                "article_id": 1,
                "title": "Seafood substitutions are increasing",
                "topic": "cooking",
                "author": "weegembump",
                "body": "Text from the article..",
                "created_at": "2018-05-30T15:59:13.341Z",
                "votes": 0,
                "article_img_url": "https://images.pexels.com/photos/158651/news-newsletter-newspaper-information-158651.jpeg?w=700&h=700",
                "comment_count": 6,
            }
        },
    },
    "PATCH /api/articles/:article_id": {
        "description": "adds inc_votes to the article's votes and serves the updated article",
        "exampleRequest": {"inc_votes": 1},
        "exampleResponse": {"article": {"article_id": 1, "votes": 1}},
    },
    "GET /api/articles/:article_id/comments": {
        "description": "serves an array of the article's comments, newest first",
        "queries": [],
        "exampleResponse": {
            "comments": [
                {
                    "comment_id": 1,
                    "article_id": 1,
                    "author": "butter_bridge",
                    "body": "Oh, I've got compassion running out of my nose, pal!",
                    "votes": 16,
                    "created_at": "2020-04-06T12:17:00.000Z",
                }
            ]
        },
    },
    "POST /api/articles/:article_id/comments": {
        "description": "adds a comment to the article and serves the stored comment",
        "exampleRequest": {"username": "butter_bridge", "body": "Nice read"},
        "exampleResponse": {
            "comment": {
                "comment_id": 19,
                "article_id": 1,
                "author": "butter_bridge",
                "body": "Nice read",
                "votes": 0,
                "created_at": "2024-01-01T10:00:00.000Z",
            }
        },
    },
    "DELETE /api/comments/:comment_id": {
        "description": "deletes the comment; responds with 204 and no body",
    },
    "GET /api/users": {
        "description": "serves an array of all users",
        "queries": [],
        "exampleResponse": {
            "users": [
                {
                    "username": "butter_bridge",
                    "name": "jonny",
                    "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg",
                }
            ]
        },
    },
    "GET /api/users/:username": {
        "description": "serves a single user",
        "queries": [],
        "exampleResponse": {
            "user": {
                "username": "butter_bridge",
                "name": "jonny",
                "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg",
            }
        },
    },
}
