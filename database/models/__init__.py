from .base import Base
from .user import User
from .answer import UserAnswer
from .compatibility import UserCompatibility

__all__ = [
    'Base',
    'User',
    'UserAnswer',
    'UserCompatibility',
]
