"""Centralized HTTP error handling."""

from flask import current_app, jsonify, request
from werkzeug.exceptions import HTTPException, InternalServerError, default_exceptions


def _handle_error(error, *, is_server_error: bool):
    """Return a JSON error payload while logging appropriately."""

    code = getattr(error, "code", None) or (500 if is_server_error else 400)
    message = getattr(error, "name", None) or ("Internal Server Error" if is_server_error else "Error")

    if is_server_error:
        # 未処理例外は original_exception に元の例外が入る
        original = getattr(error, "original_exception", None) or error
        current_app.logger.error(
            "%s %s (%s)",
            code,
            request.path,
            request.remote_addr,
            exc_info=original,
            extra={"event": "http.server_error"},
        )
    else:
        current_app.logger.warning(
            "%s %s (%s)",
            code,
            request.path,
            request.remote_addr,
            extra={"event": "http.client_error"},
        )

    response = jsonify({"status": "error", "code": code, "message": message})
    response.status_code = code
    return response


def register_error_handlers(app):
    """Register global JSON error handlers."""

    def handle_client_errors(error: HTTPException):
        return _handle_error(error, is_server_error=False)

    def handle_server_errors(error):
        return _handle_error(error, is_server_error=True)

    for status_code in default_exceptions:
        if 400 <= status_code < 500:
            app.register_error_handler(status_code, handle_client_errors)
        elif status_code >= 500:
            app.register_error_handler(status_code, handle_server_errors)

    app.register_error_handler(InternalServerError, handle_server_errors)
