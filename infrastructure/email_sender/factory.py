"""Mail provider factory - Infrastructure layer.

このモジュールは設定に基づいて適切なメール送信実装を生成するファクトリを提供します。
"""

import logging
from typing import Optional

from flask_mailman import Mail

from core.settings import settings
from domain.email_sender.sender_interface import IMailProvider
from .smtp_sender import SmtpMailProvider
from .console_sender import ConsoleMailProvider


logger = logging.getLogger(__name__)


class MailProviderFactory:
    """メール送信実装のファクトリクラス.

    設定に基づいて適切なIMailProvider実装を生成します。
    """

    PROVIDER_SMTP = "smtp"
    PROVIDER_CONSOLE = "console"

    DEFAULT_PROVIDER = PROVIDER_SMTP

    @staticmethod
    def create(
        provider: Optional[str] = None,
        mail: Optional[Mail] = None,
    ) -> IMailProvider:
        """設定に基づいてメール送信実装を生成する.

        Args:
            provider: メールプロバイダー名（smtp, console）
                     Noneの場合は MAIL_PROVIDER 設定から取得
            mail: Flask-Mailmanインスタンス（SMTPプロバイダーで必要）

        Returns:
            IMailProvider: メール送信実装

        Raises:
            ValueError: 未対応のプロバイダーが指定された場合、
                        またはSMTPでMailインスタンスがない場合
        """
        if provider is None:
            provider = settings.mail_provider

        provider = provider.lower().strip()

        logger.info(
            f"Creating mail provider: {provider}",
            extra={"event": "email.factory.create", "provider": provider}
        )

        if provider == MailProviderFactory.PROVIDER_SMTP:
            if mail is None:
                raise ValueError("Flask-Mailman instance is required for SMTP provider.")
            return SmtpMailProvider(mail=mail)

        elif provider == MailProviderFactory.PROVIDER_CONSOLE:
            return ConsoleMailProvider()

        else:
            raise ValueError(
                f"Unsupported mail provider: {provider}. "
                f"Supported providers: {MailProviderFactory.PROVIDER_SMTP}, "
                f"{MailProviderFactory.PROVIDER_CONSOLE}"
            )
