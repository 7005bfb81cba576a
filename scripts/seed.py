"""Recreate the news database tables and load a generated development dataset."""
import asyncio
import argparse
import random
import time
from datetime import datetime, timezone, timedelta

from news_api.config import settings
from news_api.database import Database
from news_api.logging_config import configure_logging
from news_api.seed import seed

TOPICS = [
    {"slug": "coding", "description": "Code is love, code is life"},
    {"slug": "football", "description": "FOOTIE!"},
    {"slug": "cooking", "description": "Hey good looking, what you got cooking?"},
]

USERS = [
    {"username": "tickle122", "name": "Tom Tickle",
     "avatar_url": "https://vignette.wikia.nocookie.net/mrmen/images/d/d6/Mr-Tickle-9a.png/revision/latest?cb=20180127221953"},
    {"username": "grumpy19", "name": "Paul Grump",
     "avatar_url": "https://vignette.wikia.nocookie.net/mrmen/images/7/78/Mr-Grumpy-3A.PNG/revision/latest?cb=20170707233013"},
    {"username": "happyamy2016", "name": "Amy Happy",
     "avatar_url": "https://vignette1.wikia.nocookie.net/mrmen/images/7/7f/Mr_Happy.jpg/revision/latest?cb=20140102171729"},
    {"username": "cooljmessy", "name": "Peter Messy",
     "avatar_url": "https://vignette.wikia.nocookie.net/mrmen/images/1/1a/MR_MESSY_4A.jpg/revision/latest/scale-to-width-down/250?cb=20170730171002"},
    {"username": "weegembump", "name": "Gemma Bump",
     "avatar_url": "https://vignette.wikia.nocookie.net/mrmen/images/7/7e/MrMen-Bump.png/revision/latest?cb=20180123225553"},
    {"username": "jessjelly", "name": "Jess Jelly",
     "avatar_url": "https://vignette.wikia.nocookie.net/mrmen/images/4/4f/MR_JELLY_4A.jpg/revision/latest?cb=20180104121141"},
]


def build_dataset(num_articles: int, max_comments: int) -> dict:
    now = datetime.now(timezone.utc)
    usernames = [u["username"] for u in USERS]
    articles = []
    comments = []
    for i in range(num_articles):
        topic = random.choice(TOPICS)["slug"]
        created = now - timedelta(days=random.randint(0, 365), minutes=random.randint(0, 1440))
        title = f"Article {i}: notes on {topic}"
        articles.append({
            "title": title,
            "topic": topic,
            "author": random.choice(usernames),
            "body": f"This is the full body of article {i} about {topic}. " * 10,
            "created_at": created,
            "votes": random.randint(0, 100),
        })
        for j in range(random.randint(0, max_comments)):
            comments.append({
                "article_title": title,
                "author": random.choice(usernames),
                "body": f"Comment {j} on article {i}.",
                "votes": random.randint(-5, 20),
                "created_at": created + timedelta(hours=j + 1),
            })
    return {"topics": TOPICS, "users": USERS, "articles": articles, "comments": comments}


async def run(small: bool = False):
    num_articles = 30 if small else 1000
    max_comments = 3 if small else 10
    data = build_dataset(num_articles, max_comments)

    print(f"Seeding: {len(TOPICS)} topics, {len(USERS)} users, {num_articles} articles, {len(data['comments'])} comments")
    start = time.perf_counter()

    database = Database(settings.DATABASE_URL)
    await database.connect()
    try:
        await database.drop_all()
        await database.create_all()
        async with database.session() as session:
            await seed(session, data)
            await session.commit()
    finally:
        await database.disconnect()

    elapsed = time.perf_counter() - start
    print(f"\nSeeding complete in {elapsed:.1f}s")


def main():
    parser = argparse.ArgumentParser(description="Seed the news database")
    parser.add_argument("--small", action="store_true", help="Use small dataset (30 articles)")
    args = parser.parse_args()
    configure_logging(settings.LOG_LEVEL)
    asyncio.run(run(small=args.small))


if __name__ == "__main__":
    main()
