"""プロセス内メモリにユーザーを保持するリポジトリ。開発・テスト用。"""

from __future__ import annotations

import dataclasses
import threading
from typing import Dict, Optional

from domain.user.entities import User
from domain.user.exceptions import UserAlreadyExistsError
from domain.user.repository import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
        self._lock = threading.Lock()

    def find_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            user = self._users.get(email)
            if user is None:
                return None
            # 保存済みの状態は save 以外から変更させない
            return dataclasses.replace(user, profile=dict(user.profile))

    def save(self, user: User) -> None:
        with self._lock:
            # 同時登録時の一意性はここで保証する
            if user.email in self._users:
                raise UserAlreadyExistsError(user.email)
            self._users[user.email] = dataclasses.replace(user, profile=dict(user.profile))
