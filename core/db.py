"""Database instance shared by ORM models and repositories."""

from flask_sqlalchemy import SQLAlchemy

# コミット後もセッション外でモデル属性を参照できるようにする
db = SQLAlchemy(session_options={"expire_on_commit": False})

__all__ = ["db"]
