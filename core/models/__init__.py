"""ORM models shared across applications."""

from .user import User

__all__ = [
    'User',
]
