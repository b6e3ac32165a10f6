"""Mail provider infrastructure layer - Concrete implementations.

このモジュールはメール送信機能の具体的な実装を提供します。
各実装はドメイン層のIMailProviderインターフェースを実装します。
"""

from .smtp_sender import SmtpMailProvider
from .console_sender import ConsoleMailProvider
from .factory import MailProviderFactory

__all__ = ["SmtpMailProvider", "ConsoleMailProvider", "MailProviderFactory"]
