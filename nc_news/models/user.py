from sqlalchemy import Column, String

from nc_news.dependencies.database import Base


class User(Base):
    __tablename__ = "users"

    username = Column(String(100), primary_key=True, comment="사용자명")
    avatar_url = Column(String(500), nullable=False, comment="프로필 이미지 URL")
    name = Column(String(100), nullable=False, comment="이름")
