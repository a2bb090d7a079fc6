"""
테스트용 데이터셋: 주제 3개, 사용자 4명, 게시글 12개, 댓글 18개.
게시글/댓글은 목록 순서대로 insert되어 article_id, comment_id가 1부터 매겨짐
"""

from datetime import datetime, timezone


def _from_millis(millis: int) -> datetime:
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc).replace(tzinfo=None)


topics = [
    {"slug": "mitch", "description": "The man, the Mitch, the legend"},
    {"slug": "cats", "description": "Not dogs"},
    {"slug": "paper", "description": "what books are made of"},
]

users = [
    {
        "username": "butter_bridge",
        "name": "jonny",
        "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg",
    },
    {
        "username": "icellusedkars",
        "name": "sam",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24604688?s=460&v=4",
    },
    {
        "username": "rogersop",
        "name": "paul",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24394918?s=400&v=4",
    },
    {
        "username": "lurker",
        "name": "do_nothing",
        "avatar_url": "https://www.golenbock.com/wp-content/uploads/2015/01/placeholder-user.png",
    },
]

articles = [
    {
        "title": "Living in the shadow of a great man",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "I find this existence challenging",
        "created_at": _from_millis(1542284514171),
        "votes": 100,
    },
    {
        "title": "Sony Vaio; or, The Laptop",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Call me Mitchell. Some years ago, never mind how long precisely, "
        "having little or no money in my purse, and nothing particular to interest "
        "me on shore, I thought I would buy a laptop about a little and see the "
        "codey part of the world.",
        "created_at": _from_millis(1416140514171),
    },
    {
        "title": "Eight pug gifs that remind me of mitch",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "some gifs",
        "created_at": _from_millis(1289996514171),
    },
    {
        "title": "Student SUES Mitch!",
        "topic": "mitch",
        "author": "rogersop",
        "body": "We all love Mitch and his wonderful, unique typing style. However, "
        "the volume of his typing has ALLEGEDLY burst another students eardrums, "
        "and they are now suing for damages",
        "created_at": _from_millis(1163852514171),
    },
    {
        "title": "UNCOVERED: catspiracy to bring down democracy",
        "topic": "cats",
        "author": "rogersop",
        "body": "Bastet walks amongst us, and the cats are taking arms!",
        "created_at": _from_millis(1037708514171),
    },
    {
        "title": "A",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Delicious tin of cat food",
        "created_at": _from_millis(911564514171),
    },
    {
        "title": "Z",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "I was hungry.",
        "created_at": _from_millis(785420514171),
    },
    {
        "title": "Does Mitch predate civilisation?",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Archaeologists have uncovered a gigantic statue from the dawn of "
        "humanity, and it has an uncanny resemblance to Mitch.",
        "created_at": _from_millis(659276514171),
    },
    {
        "title": "They're not exactly dogs, are they?",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "Well? Think about it.",
        "created_at": _from_millis(533132514171),
    },
    {
        "title": "Seven inspirational thought leaders from Manchester UK",
        "topic": "mitch",
        "author": "rogersop",
        "body": "Who are we kidding, there is only one, and it's Mitch!",
        "created_at": _from_millis(406988514171),
    },
    {
        "title": "Am I a cat?",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Having run out of ideas for articles, I am staring at the wall "
        "blankly, like a cat. Does this make me a cat?",
        "created_at": _from_millis(280844514171),
    },
    {
        "title": "Moustache",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "Have you seen the size of that thing?",
        "created_at": _from_millis(154700514171),
    },
]

comments = [
    {
        "body": "Oh, I've got compassion running out of my nose, pal! "
        "I'm the Sultan of Sentiment!",
        "article_id": 9,
        "author": "butter_bridge",
        "votes": 16,
        "created_at": _from_millis(1511354163389),
    },
    {
        "body": "The beautiful thing about treasure is that it exists. Got to find "
        "out what kind of sheets these are; not cotton, not rayon, silky.",
        "article_id": 1,
        "author": "butter_bridge",
        "votes": 14,
        "created_at": _from_millis(1479818163389),
    },
    {
        "body": "Replacing the quiet elegance of the dark suit and tie with the "
        "casual indifference of these muted earth tones is a form of fashion "
        "suicide, but, uh, call me crazy, on you it works.",
        "article_id": 1,
        "author": "icellusedkars",
        "votes": 100,
        "created_at": _from_millis(1448282163389),
    },
    {
        "body": "I carry a log, yes. Is it funny to you? It is not to me.",
        "article_id": 1,
        "author": "icellusedkars",
        "votes": -100,
        "created_at": _from_millis(1416746163389),
    },
    {
        "body": "I hate streaming noses",
        "article_id": 1,
        "author": "icellusedkars",
        "created_at": _from_millis(1385210163389),
    },
    {
        "body": "I hate streaming eyes even more",
        "article_id": 1,
        "author": "icellusedkars",
        "created_at": _from_millis(1353674163389),
    },
    {
        "body": "Lobster pot",
        "article_id": 1,
        "author": "icellusedkars",
        "created_at": _from_millis(1322138163389),
    },
    {
        "body": "Delicious crackerbreads",
        "article_id": 1,
        "author": "icellusedkars",
        "created_at": _from_millis(1290602163389),
    },
    {
        "body": "Superficially charming",
        "article_id": 1,
        "author": "icellusedkars",
        "created_at": _from_millis(1259066163389),
    },
    {
        "body": "git push origin master",
        "article_id": 1,
        "author": "icellusedkars",
        "created_at": _from_millis(1227530163389),
    },
    {
        "body": "Ambidextrous marsupial",
        "article_id": 1,
        "author": "icellusedkars",
        "created_at": _from_millis(1196006163389),
    },
    {
        "body": "Massive intercranial brain haemorrhage",
        "article_id": 1,
        "author": "icellusedkars",
        "created_at": _from_millis(1164470163389),
    },
    {
        "body": "Fruit pastilles",
        "article_id": 1,
        "author": "icellusedkars",
        "created_at": _from_millis(1132934163389),
    },
    {
        "body": "What do you see? I have no idea where this will lead us. "
        "This place I speak of, is known as the Black Lodge.",
        "article_id": 5,
        "author": "icellusedkars",
        "votes": 16,
        "created_at": _from_millis(1101398163389),
    },
    {
        "body": "I am 100% sure that we're not completely sure.",
        "article_id": 5,
        "author": "butter_bridge",
        "votes": 1,
        "created_at": _from_millis(1069862163389),
    },
    {
        "body": "This is a bad article name",
        "article_id": 6,
        "author": "butter_bridge",
        "votes": 1,
        "created_at": _from_millis(1038326163389),
    },
    {
        "body": "The owls are not what they seem.",
        "article_id": 9,
        "author": "icellusedkars",
        "votes": 20,
        "created_at": _from_millis(1006790163389),
    },
    {
        "body": "This morning, I showered for nine minutes.",
        "article_id": 1,
        "author": "butter_bridge",
        "votes": 16,
        "created_at": _from_millis(975254163389),
    },
]
