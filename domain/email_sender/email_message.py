"""Email message value objects - Domain layer.

このモジュールはメールメッセージを表す値オブジェクトを提供します。
値オブジェクトは不変（immutable）であり、作成後に変更することはできません。
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MailAddress:
    """表示名付きのメールアドレス.

    Attributes:
        name: 表示名
        email: メールアドレス
    """

    name: str
    email: str

    def __post_init__(self):
        if not self.email:
            raise ValueError("メールアドレスが指定されていません")

    def __str__(self) -> str:
        if self.name:
            return f"{self.name} <{self.email}>"
        return self.email


@dataclass(frozen=True)
class EmailMessage:
    """メールメッセージを表す値オブジェクト.

    送信に必要な4項目（宛先・送信元・件名・本文）を全て保持します。
    本文にはHTMLを含めることができます。

    Attributes:
        to: 送信先
        from_address: 送信元
        subject: メールの件名
        body: メールの本文（HTML可）
    """

    to: MailAddress
    from_address: MailAddress
    subject: str
    body: str

    def __post_init__(self):
        """バリデーション実行."""
        if self.to is None:
            raise ValueError("受信者が指定されていません")
        if self.from_address is None:
            raise ValueError("送信元が指定されていません")
        if not self.subject:
            raise ValueError("件名が指定されていません")
        if not self.body:
            raise ValueError("本文が指定されていません")
