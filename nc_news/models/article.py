from sqlalchemy import Column, ForeignKey, Integer, String, Text

from nc_news.dependencies.database import Base
from nc_news.models.mixin import CreatedAtMixin, VotesMixin


class Article(Base, CreatedAtMixin, VotesMixin):
    __tablename__ = "articles"

    article_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False, comment="글 제목")
    body = Column(Text, nullable=False, comment="글 내용")
    topic = Column(
        String(100),
        ForeignKey("topics.slug"),
        nullable=False,
        index=True,
        comment="주제 slug",
    )
    author = Column(
        String(100),
        ForeignKey("users.username"),
        nullable=False,
        index=True,
        comment="글 작성자 username",
    )
