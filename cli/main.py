"""Command line entry point for registering users."""

from typing import Dict, Tuple

import click

from application.user import CreateUserRequest, InvalidRequestError
from domain.user import UserAlreadyExistsError
from webapp import create_app
from webapp.api.users import USE_CASE_EXTENSION_KEY


def _parse_fields(fields: Tuple[str, ...]) -> Dict[str, str]:
    parsed: Dict[str, str] = {}
    for item in fields:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}", param_hint="--field")
        parsed[key] = value
    return parsed


@click.command("create-user")
@click.option("--name", required=True, help="Display name of the new user.")
@click.option("--email", required=True, help="Email address of the new user.")
@click.option("--field", "fields", multiple=True, metavar="KEY=VALUE", help="Additional profile field.")
def main(name: str, email: str, fields: Tuple[str, ...]) -> None:
    """Register a user and send the welcome mail."""
    payload = _parse_fields(fields)
    payload.update(name=name, email=email)

    try:
        request = CreateUserRequest.from_mapping(payload)
    except InvalidRequestError as exc:
        raise click.ClickException(str(exc)) from exc

    app = create_app()
    with app.app_context():
        try:
            app.extensions[USE_CASE_EXTENSION_KEY].execute(request)
        except UserAlreadyExistsError as exc:
            raise click.ClickException(str(exc)) from exc

    click.echo(f"Created user {email}")


if __name__ == '__main__':
    main()
