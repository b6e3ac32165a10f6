import pytest
from click.testing import CliRunner

import cli.main as cli_main
from infrastructure.email_sender import ConsoleMailProvider
from infrastructure.in_memory_user_repository import InMemoryUserRepository
from webapp import create_app
from webapp.config import TestConfig


@pytest.fixture
def repository(monkeypatch):
    repository = InMemoryUserRepository()
    monkeypatch.setattr(
        cli_main,
        "create_app",
        lambda: create_app(
            TestConfig,
            users_repository=repository,
            mail_provider=ConsoleMailProvider(),
        ),
    )
    return repository


def test_create_user_command(repository):
    result = CliRunner().invoke(
        cli_main.main,
        ["--name", "Ana", "--email", "ana@x.com", "--field", "city=Porto", "--field", "age=30"],
    )

    assert result.exit_code == 0, result.output
    assert "Created user ana@x.com" in result.output
    user = repository.find_by_email("ana@x.com")
    assert user.name == "Ana"
    assert user.profile == {"city": "Porto", "age": "30"}


def test_create_user_command_rejects_duplicate(repository):
    runner = CliRunner()
    runner.invoke(cli_main.main, ["--name", "Ana", "--email", "ana@x.com"])

    result = runner.invoke(cli_main.main, ["--name", "Ana", "--email", "ana@x.com"])

    assert result.exit_code == 1
    assert "User already exists" in result.output


def test_create_user_command_rejects_malformed_field(repository):
    result = CliRunner().invoke(
        cli_main.main, ["--name", "Ana", "--email", "ana@x.com", "--field", "novalue"]
    )

    assert result.exit_code == 2
    assert repository.find_by_email("ana@x.com") is None


def test_create_user_command_rejects_blank_name(repository):
    result = CliRunner().invoke(cli_main.main, ["--name", " ", "--email", "ana@x.com"])

    assert result.exit_code == 1
    assert "'name' is required" in result.output


@pytest.fixture
def file_backed_app_factory(tmp_path, monkeypatch):
    """既定の配線（SQLAlchemy + locmem メール）をファイルDBで使うファクトリ"""

    class FileBackedConfig(TestConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'users.db'}"

    built = []

    def factory():
        app = create_app(FileBackedConfig)
        built.append(app)
        return app

    monkeypatch.setattr(cli_main, "create_app", factory)
    return built


def test_duplicate_is_rejected_across_separate_runs(file_backed_app_factory):
    runner = CliRunner()

    first = runner.invoke(cli_main.main, ["--name", "Ana", "--email", "ana@x.com"])
    second = runner.invoke(cli_main.main, ["--name", "Ana", "--email", "ana@x.com"])

    assert first.exit_code == 0, first.output
    assert second.exit_code == 1
    assert "User already exists" in second.output

    first_app, second_app = file_backed_app_factory
    assert first_app is not second_app
    assert len(first_app.extensions["mailman"].outbox) == 1
    assert not getattr(second_app.extensions["mailman"], "outbox", [])
