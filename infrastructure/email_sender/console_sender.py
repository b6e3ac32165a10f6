"""Console mail provider implementation - Infrastructure layer.

メールを実際には送信せず、ログに出力します。
開発環境で実際にメールを送信せずに動作を確認できます。
"""

import logging

from domain.email_sender.sender_interface import IMailProvider
from domain.email_sender.email_message import EmailMessage


logger = logging.getLogger(__name__)


class ConsoleMailProvider(IMailProvider):
    """ログ出力によるメール送信実装.

    Attributes:
        log_level: ログレベル（デフォルト: INFO）
    """

    def __init__(self, log_level: int = logging.INFO):
        self.log_level = log_level

    def send_mail(self, message: EmailMessage) -> None:
        logger.log(
            self.log_level,
            self._format_message(message),
            extra={
                "event": "email.console.sent",
                "to": message.to.email,
                "subject": message.subject
            }
        )

    def validate_config(self) -> bool:
        """コンソール送信は設定不要のため、常にTrueを返します。"""
        return True

    def _format_message(self, message: EmailMessage) -> str:
        lines = [
            f"From: {message.from_address}",
            f"To: {message.to}",
            f"Subject: {message.subject}",
            "",
            message.body,
        ]
        return "\n".join(lines)
