from core.settings import ApplicationSettings


def test_defaults_when_environment_is_empty():
    settings = ApplicationSettings(env={})

    assert settings.database_uri == "sqlite:///users.db"
    assert settings.mail_provider == "smtp"
    assert settings.mail_server == "smtp.mailtrap.io"
    assert settings.mail_port == 2525
    assert settings.mail_username is None
    assert settings.mail_use_tls is False
    assert settings.log_level == "INFO"


def test_values_are_read_from_mapping():
    settings = ApplicationSettings(
        env={
            "DATABASE_URI": "postgresql://db/users",
            "MAIL_PROVIDER": " Console ",
            "MAIL_PORT": "587",
            "MAIL_USE_TLS": "yes",
            "MAIL_USERNAME": "relay-user",
            "LOG_LEVEL": "debug",
        }
    )

    assert settings.database_uri == "postgresql://db/users"
    assert settings.mail_provider == "console"
    assert settings.mail_port == 587
    assert settings.mail_use_tls is True
    assert settings.mail_username == "relay-user"
    assert settings.log_level == "DEBUG"


def test_invalid_values_fall_back_to_defaults():
    settings = ApplicationSettings(env={"MAIL_PORT": "abc", "MAIL_USE_TLS": "maybe"})

    assert settings.mail_port == 2525
    assert settings.mail_use_tls is False


def test_app_config_takes_precedence(app):
    settings = ApplicationSettings(env={"MAIL_PROVIDER": "smtp"})
    app.config["MAIL_PROVIDER"] = "console"

    assert settings.mail_provider == "console"
