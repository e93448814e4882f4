from sqlalchemy import Column, Text, Index

from .base import Base


class UserAnswer(Base):
    """One user's answer to one question."""
    __tablename__ = 'user_answers'

    user_id = Column(Text, primary_key=True)
    answer_id = Column(Text, nullable=False)
    question_id = Column(Text, primary_key=True)

    __table_args__ = (
        Index('idx_user_answers_user', 'user_id'),
    )
