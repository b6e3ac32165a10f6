from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict
from uuid import uuid4


@dataclass
class User:
    """登録済みユーザー。

    作成時に渡された値はそのまま保持し、正規化は行わない。
    ``profile`` には name / email 以外の任意の項目が入る。
    """

    name: str
    email: str
    profile: Dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
