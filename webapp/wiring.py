"""Construction of the registration use case from concrete adapters."""

from __future__ import annotations

from typing import Optional

from application.user import CreateUserUseCase
from domain.email_sender import IMailProvider
from domain.user import UserRepository
from infrastructure.email_sender import MailProviderFactory
from infrastructure.user_repository import SqlAlchemyUserRepository

from .extensions import db, mail


def build_create_user_use_case(
    users_repository: Optional[UserRepository] = None,
    mail_provider: Optional[IMailProvider] = None,
) -> CreateUserUseCase:
    """Wire the use case, defaulting to the SQLAlchemy and configured mail adapters."""

    if users_repository is None:
        users_repository = SqlAlchemyUserRepository(db.session)
    if mail_provider is None:
        mail_provider = MailProviderFactory.create(mail=mail)
    return CreateUserUseCase(users_repository, mail_provider)
