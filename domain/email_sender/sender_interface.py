"""Mail provider interface - Domain layer contract.

このインターフェースはメール送信機能の契約を定義します。
具体的な実装（SMTP, Console等）はInfrastructure層で提供されます。
"""

from abc import ABC, abstractmethod
from .email_message import EmailMessage


class IMailProvider(ABC):
    """メール送信インターフェース.

    異なる実装（SMTP, Console）を切り替え可能にします。
    送信失敗は例外として呼び出し元に伝播させ、内部でリトライはしません。
    """

    @abstractmethod
    def send_mail(self, message: EmailMessage) -> None:
        """メールを送信する.

        Args:
            message: 送信するメールメッセージ

        Raises:
            Exception: 送信中にエラーが発生した場合
        """

    @abstractmethod
    def validate_config(self) -> bool:
        """設定が有効かどうかを検証する.

        Returns:
            bool: 設定が有効な場合True、無効な場合False
        """
