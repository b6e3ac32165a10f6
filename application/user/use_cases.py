"""ユーザー登録ユースケース

既存ユーザーの確認、保存、ウェルカムメール送信を順番に実行する。
各ステップは前のステップの完了を待ってから開始する。

重複チェックは find_by_email → save の読み取り後書き込みであり、
同時に同じメールアドレスで登録された場合の一意性はリポジトリ側の
制約（UNIQUE 制約など）に依存する。

save 成功後に send_mail が失敗した場合、ユーザーは保存されたまま
例外が呼び出し元に伝播する。補償処理（削除・リトライ）は行わない。
"""
from __future__ import annotations

import logging

from application.user.dto import CreateUserRequest
from domain.email_sender import EmailMessage, IMailProvider, MailAddress
from domain.user import User, UserAlreadyExistsError, UserRepository


logger = logging.getLogger(__name__)

WELCOME_SENDER = MailAddress(name="My App Team", email="team@myapp.com")
WELCOME_SUBJECT = "Welcome to the platform"
WELCOME_BODY = "<h3>You can now log in to our platform.</h3>"


def build_welcome_message(request: CreateUserRequest) -> EmailMessage:
    return EmailMessage(
        to=MailAddress(name=request.name, email=request.email),
        from_address=WELCOME_SENDER,
        subject=WELCOME_SUBJECT,
        body=WELCOME_BODY,
    )


class CreateUserUseCase:
    def __init__(self, users_repository: UserRepository, mail_provider: IMailProvider):
        self.users_repository = users_repository
        self.mail_provider = mail_provider

    def execute(self, request: CreateUserRequest) -> None:
        existing_user = self.users_repository.find_by_email(request.email)
        if existing_user is not None:
            logger.info(
                "Rejected registration for existing user",
                extra={"event": "user.create.duplicate", "email": request.email},
            )
            raise UserAlreadyExistsError(request.email)

        user = User(name=request.name, email=request.email, profile=dict(request.extra))
        self.users_repository.save(user)
        logger.info(
            "User saved",
            extra={"event": "user.create.saved", "user_id": user.id, "email": request.email},
        )

        self.mail_provider.send_mail(build_welcome_message(request))
        logger.info(
            "Welcome mail dispatched",
            extra={"event": "user.create.completed", "email": request.email},
        )
