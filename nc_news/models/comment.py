from sqlalchemy import Column, ForeignKey, Integer, String, Text

from nc_news.dependencies.database import Base
from nc_news.models.mixin import CreatedAtMixin, VotesMixin


class Comment(Base, CreatedAtMixin, VotesMixin):
    __tablename__ = "comments"

    comment_id = Column(Integer, primary_key=True, autoincrement=True)
    author = Column(
        String(100),
        ForeignKey("users.username"),
        nullable=False,
        index=True,
        comment="댓글 작성자 username",
    )
    article_id = Column(
        Integer,
        ForeignKey("articles.article_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="글 ID",
    )
    body = Column(Text, nullable=False, comment="댓글 내용")
