from dotenv import load_dotenv

from core.settings import ApplicationSettings

load_dotenv()

_settings = ApplicationSettings()


class Config:
    """Flask application configuration populated from the environment."""

    SQLALCHEMY_DATABASE_URI = _settings.database_uri
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Mail
    MAIL_PROVIDER = _settings.mail_provider
    MAIL_BACKEND = _settings.mail_backend
    MAIL_SERVER = _settings.mail_server
    MAIL_PORT = _settings.mail_port
    MAIL_USERNAME = _settings.mail_username
    MAIL_PASSWORD = _settings.mail_password
    MAIL_USE_TLS = _settings.mail_use_tls

    LOG_LEVEL = _settings.log_level


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    MAIL_PROVIDER = "smtp"
    # 送信内容は app.extensions["mailman"].outbox に溜まる
    MAIL_BACKEND = "locmem"
