import dataclasses

import pytest

from domain.email_sender import EmailMessage, MailAddress


def _message(**overrides):
    values = dict(
        to=MailAddress("Ana", "ana@x.com"),
        from_address=MailAddress("Team", "team@example.com"),
        subject="Hello",
        body="<p>Hi</p>",
    )
    values.update(overrides)
    return EmailMessage(**values)


def test_mail_address_formats_with_display_name():
    assert str(MailAddress("Ana", "ana@x.com")) == "Ana <ana@x.com>"
    assert str(MailAddress("", "ana@x.com")) == "ana@x.com"


def test_mail_address_requires_email():
    with pytest.raises(ValueError):
        MailAddress("Ana", "")


@pytest.mark.parametrize(
    "field, value",
    [("to", None), ("from_address", None), ("subject", ""), ("body", "")],
)
def test_email_message_requires_all_fields(field, value):
    with pytest.raises(ValueError):
        _message(**{field: value})


def test_email_message_is_immutable():
    message = _message()

    with pytest.raises(dataclasses.FrozenInstanceError):
        message.subject = "changed"
