"""ユーザー登録APIエンドポイント。"""
from __future__ import annotations

from flask import current_app, jsonify, request

from application.user import CreateUserRequest, InvalidRequestError
from domain.user import UserAlreadyExistsError

from . import bp

USE_CASE_EXTENSION_KEY = "create_user_use_case"


def _error(message: str, status: int):
    return jsonify({"status": "error", "message": message}), status


@bp.post("/users")
def create_user():
    """Register a user and send the welcome mail.

    保存やメール送信の失敗はここでは捕捉せず、共通のエラーハンドラで 500 を返す。
    """

    payload = request.get_json(silent=True)
    try:
        create_request = CreateUserRequest.from_mapping(payload)
    except InvalidRequestError as exc:
        return _error(str(exc), 400)

    use_case = current_app.extensions[USE_CASE_EXTENSION_KEY]
    try:
        use_case.execute(create_request)
    except UserAlreadyExistsError as exc:
        return _error(str(exc), 409)

    return (
        jsonify(
            {
                "status": "created",
                "user": {"name": create_request.name, "email": create_request.email},
            }
        ),
        201,
    )
