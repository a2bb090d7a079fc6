from sqlalchemy import Column, DateTime, Integer, func


class CreatedAtMixin:
    """
    작성 시각을 가지는 모델(게시글, 댓글)의 공통 컬럼
    """

    created_at = Column(
        DateTime, server_default=func.now(), nullable=False, index=True
    )


class VotesMixin:
    """
    투표 수 컬럼. 값은 `votes = votes + :delta` 형태의 UPDATE로만 변경함
    """

    votes = Column(Integer, nullable=False, default=0, comment="투표 수")
