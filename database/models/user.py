from sqlalchemy import Column, Text, BigInteger, Index

from .base import Base


class User(Base):
    """
    Profile row used for candidate search.

    created_at is stored as epoch seconds and doubles as the pagination
    cursor for the candidate scan.
    """
    __tablename__ = 'users'

    id = Column(Text, primary_key=True)
    gender = Column(Text, nullable=False)
    interested_in = Column(Text, nullable=False)
    created_at = Column(BigInteger, nullable=False)

    __table_args__ = (
        Index('idx_users_search', 'gender', 'interested_in', 'created_at'),
    )
