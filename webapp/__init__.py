import logging
from typing import Optional

from flask import Flask

from core.logging_config import configure_logging
from domain.email_sender import IMailProvider
from domain.user import UserRepository

from .api.users import USE_CASE_EXTENSION_KEY
from .extensions import db, mail


logger = logging.getLogger(__name__)


def create_app(
    config_object: Optional[object] = None,
    *,
    users_repository: Optional[UserRepository] = None,
    mail_provider: Optional[IMailProvider] = None,
) -> Flask:
    """アプリケーションファクトリ

    users_repository / mail_provider を渡すと既定のアダプタの代わりに使用する。
    """
    from .config import Config
    from .api import bp as api_bp
    from .error_handlers import register_error_handlers
    from .health import health_bp
    from .wiring import build_create_user_use_case

    app = Flask(__name__)
    app.config.from_object(config_object or Config)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    # 拡張初期化
    db.init_app(app)
    mail.init_app(app)

    app.register_blueprint(api_bp)
    app.register_blueprint(health_bp)
    register_error_handlers(app)

    with app.app_context():
        import core.models  # noqa: F401

        db.create_all()

        use_case = build_create_user_use_case(users_repository, mail_provider)
        if not use_case.mail_provider.validate_config():
            logger.warning(
                "Mail provider configuration is incomplete",
                extra={"event": "app.mail_config_invalid"},
            )

    app.extensions[USE_CASE_EXTENSION_KEY] = use_case
    return app
