"""ユーザードメインの公開インターフェース。"""

from .entities import User
from .exceptions import UserAlreadyExistsError
from .repository import UserRepository

__all__ = [
    "User",
    "UserAlreadyExistsError",
    "UserRepository",
]
