import pytest

from infrastructure.email_sender import (
    ConsoleMailProvider,
    MailProviderFactory,
    SmtpMailProvider,
)
from webapp.extensions import mail


def test_create_smtp_provider():
    provider = MailProviderFactory.create("smtp", mail=mail)

    assert isinstance(provider, SmtpMailProvider)
    assert provider.mail is mail


def test_create_console_provider_ignores_case_and_whitespace():
    assert isinstance(MailProviderFactory.create("  Console "), ConsoleMailProvider)


def test_smtp_provider_requires_mail_instance():
    with pytest.raises(ValueError):
        MailProviderFactory.create("smtp")


def test_unknown_provider_is_rejected():
    with pytest.raises(ValueError, match="Unsupported mail provider"):
        MailProviderFactory.create("carrier-pigeon")


def test_provider_defaults_to_configured_value(app):
    app.config["MAIL_PROVIDER"] = "console"

    assert isinstance(MailProviderFactory.create(), ConsoleMailProvider)
