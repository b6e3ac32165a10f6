"""ユーザー登録アプリケーション層。"""

from .dto import CreateUserRequest, InvalidRequestError
from .use_cases import CreateUserUseCase

__all__ = ["CreateUserRequest", "CreateUserUseCase", "InvalidRequestError"]
