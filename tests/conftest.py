import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("TESTING", "true")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def app():
    """テスト用アプリケーション（インメモリSQLite + locmem メール）"""
    from webapp import create_app
    from webapp.config import TestConfig
    from webapp.extensions import db

    app = create_app(TestConfig)

    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def outbox(app):
    """locmem バックエンドが送信したメッセージの一覧"""
    mailman = app.extensions["mailman"]
    mailman.outbox = []
    return mailman.outbox
