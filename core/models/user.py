from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy.orm import Mapped, mapped_column

from core.db import db


class User(db.Model):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(db.String(36), primary_key=True)
    name: Mapped[str] = mapped_column(db.String(255), nullable=False)
    # 一意性の最終的な保証はこの UNIQUE 制約
    email: Mapped[str] = mapped_column(db.String(255), unique=True, index=True, nullable=False)
    # name / email 以外の登録項目
    profile: Mapped[dict[str, Any]] = mapped_column(db.JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    def __repr__(self) -> str:
        return f"<User {self.email}>"
