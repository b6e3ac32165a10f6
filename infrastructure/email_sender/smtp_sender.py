"""SMTP mail provider implementation - Infrastructure layer.

このモジュールはSMTPプロトコルを使用したメール送信の実装を提供します。
Flask-Mailmanを使用し、MAIL_* 設定で接続先を指定します。
"""

import logging

from flask import current_app
from flask_mailman import EmailMultiAlternatives, Mail
from markupsafe import Markup

from domain.email_sender.sender_interface import IMailProvider
from domain.email_sender.email_message import EmailMessage


logger = logging.getLogger(__name__)


class SmtpMailProvider(IMailProvider):
    """SMTPを使用したメール送信実装.

    Flask-Mailmanを使用してSMTP経由でメールを送信します。
    送信はアプリケーションコンテキスト内で行う必要があります。

    Attributes:
        mail: Flask-Mailmanインスタンス
    """

    def __init__(self, mail: Mail):
        self.mail = mail

    def send_mail(self, message: EmailMessage) -> None:
        """SMTPでメールを送信する.

        Args:
            message: 送信するメールメッセージ

        Raises:
            Exception: 送信中にエラーが発生した場合
        """
        try:
            mail_message = self._convert_to_flask_message(message)
            mail_message.send()

            logger.info(
                "Email sent successfully via SMTP",
                extra={
                    "event": "email.smtp.sent",
                    "to": message.to.email,
                    "subject": message.subject
                }
            )

        except Exception as e:
            logger.error(
                f"Failed to send email via SMTP: {e}",
                extra={
                    "event": "email.smtp.error",
                    "to": message.to.email,
                    "subject": message.subject,
                    "error": str(e)
                }
            )
            raise

    def validate_config(self) -> bool:
        """SMTP設定が有効かどうかを検証する.

        Returns:
            bool: MAIL_SERVER が設定されている場合True
        """
        mail_server = current_app.config.get('MAIL_SERVER')
        if not mail_server:
            logger.warning("MAIL_SERVER is not configured")
            return False
        return True

    def _convert_to_flask_message(self, message: EmailMessage) -> EmailMultiAlternatives:
        """ドメインメッセージをFlask-Mailmanメッセージに変換する.

        本文はHTMLとして添付し、タグを除去したテキストをプレーン本文にします。

        Args:
            message: ドメインメッセージ

        Returns:
            EmailMultiAlternatives: Flask-Mailmanメッセージ
        """
        mail_message = EmailMultiAlternatives(
            subject=message.subject,
            body=Markup(message.body).striptags(),
            from_email=str(message.from_address),
            to=[str(message.to)],
            connection=self.mail.get_connection(),
        )
        mail_message.attach_alternative(message.body, "text/html")
        return mail_message
