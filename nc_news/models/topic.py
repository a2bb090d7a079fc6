from sqlalchemy import Column, String, Text

from nc_news.dependencies.database import Base


class Topic(Base):
    __tablename__ = "topics"

    slug = Column(String(100), primary_key=True, comment="주제 식별자(ex - cats)")
    description = Column(Text, nullable=False, comment="주제 설명")
