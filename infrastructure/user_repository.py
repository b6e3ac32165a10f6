import logging
from datetime import timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from core.models.user import User as UserModel
from domain.user.entities import User
from domain.user.repository import UserRepository


logger = logging.getLogger(__name__)


class SqlAlchemyUserRepository(UserRepository):
    """SQLAlchemy backed user repository.

    Email lookup is an exact, case-sensitive match.  The UNIQUE constraint on
    ``users.email`` rejects concurrent duplicate registrations.
    """

    def __init__(self, session):
        self.session = session

    def find_by_email(self, email: str) -> Optional[User]:
        stmt = select(UserModel).filter_by(email=email)
        model = self.session.execute(stmt).scalar_one_or_none()
        if model:
            return self._to_domain(model)
        return None

    def save(self, user: User) -> None:
        model = UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            profile=dict(user.profile),
            created_at=user.created_at,
        )
        self.session.add(model)
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.error(
                "Failed to save user",
                extra={"event": "user.repository.save_failed", "email": user.email},
            )
            raise

    def _to_domain(self, model: UserModel) -> User:
        return User(
            name=model.name,
            email=model.email,
            profile=dict(model.profile or {}),
            id=model.id,
            created_at=self._as_utc(model.created_at),
        )

    @staticmethod
    def _as_utc(value):
        # SQLite はタイムゾーン情報を保持しないため UTC として復元する
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
