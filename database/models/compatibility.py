from sqlalchemy import Column, Integer, Text, Index

from .base import Base


class UserCompatibility(Base):
    """
    Persisted compatibility between a subject (user_one) and a candidate (user_two).

    No uniqueness is enforced on the pair; repeated runs append rows.
    """
    __tablename__ = 'user_compatibilities'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_one_id = Column(Text, nullable=False)
    user_two_id = Column(Text, nullable=False)
    percent = Column(Integer, nullable=False)

    __table_args__ = (
        Index('idx_user_compatibilities_user_one', 'user_one_id'),
    )
