"""ユーザードメインに関する例外定義。"""


class UserAlreadyExistsError(Exception):
    """同じメールアドレスのユーザーが既に存在する場合に発生する例外。"""

    def __init__(self, email: str):
        super().__init__("User already exists")
        self.email = email
