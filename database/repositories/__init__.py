from database.repositories.base import BaseRepository
from database.repositories.answer import AnswerRepository
from database.repositories.user import UserRepository
from database.repositories.compatibility import CompatibilityRepository

__all__ = [
    'BaseRepository',
    'AnswerRepository',
    'UserRepository',
    'CompatibilityRepository',
]
