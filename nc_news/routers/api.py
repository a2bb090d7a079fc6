from fastapi import APIRouter

router = APIRouter(prefix="/api", tags=["API"])

_LIST_QUERIES = ["limit", "p"]
_SORTED_LIST_QUERIES = ["sortBy", "orderBy", *_LIST_QUERIES]

ENDPOINTS = {
    "GET /api": {
        "description": "serves up a json representation of all the available endpoints of the api",
    },
    "GET /api/topics": {
        "description": "serves an array of all topics",
        "queries": _LIST_QUERIES,
        "exampleResponse": {
            "topics": [{"slug": "football", "description": "Footie!"}],
            "total_topics": 1,
        },
    },
    "GET /api/users": {
        "description": "serves an array of all users",
        "queries": _LIST_QUERIES,
        "exampleResponse": {
            "users": [
                {
                    "username": "butter_bridge",
                    "name": "jonny",
                    "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg",
                }
            ],
            "total_users": 1,
        },
    },
    "GET /api/users/:username": {
        "description": "serves the user with the given username",
        "exampleResponse": {
            "user": {
                "username": "lurker",
                "name": "do_nothing",
                "avatar_url": "https://www.golenbock.com/wp-content/uploads/2015/01/placeholder-user.png",
            },
            "total_users": 4,
        },
    },
    "GET /api/articles": {
        "description": "serves an array of articles, filterable by author and topic",
        "queries": ["author", "topic", *_SORTED_LIST_QUERIES],
        "exampleResponse": {
            "articles": [
                {
                    "article_id": 1,
                    "title": "Seafood substitutions are increasing",
                    "topic": "cooking",
                    "author": "weegembump",
                    "created_at": "2018-05-30T15:59:13",
                    "votes": 0,
                    "comment_count": 6,
                }
            ],
            "total_articles": 1,
        },
    },
    "GET /api/articles/:article_id": {
        "description": "serves the article with the given id, including its comment_count",
    },
    "PATCH /api/articles/:article_id": {
        "description": "increments the article's votes by inc_votes",
        "exampleRequest": {"inc_votes": 1},
    },
    "GET /api/articles/:article_id/comments": {
        "description": "serves an array of comments for the given article",
        "queries": _SORTED_LIST_QUERIES,
    },
    "POST /api/articles/:article_id/comments": {
        "description": "adds a comment to the given article and serves the new comment",
        "exampleRequest": {"username": "butter_bridge", "body": "Nice article"},
    },
    "PATCH /api/comments/:comment_id": {
        "description": "increments the comment's votes by inc_votes",
        "exampleRequest": {"inc_votes": -1},
    },
    "DELETE /api/comments/:comment_id": {
        "description": "deletes the given comment, responds with no content",
    },
}


@router.get("", summary="사용 가능한 모든 endpoint 목록")
async def get_endpoints() -> dict:
    return {"endpoints": ENDPOINTS}
