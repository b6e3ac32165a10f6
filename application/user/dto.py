"""ユーザー登録 DTO"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

_REQUIRED_FIELDS = ("name", "email")


class InvalidRequestError(ValueError):
    """リクエストに必須項目が含まれていない場合に発生する例外。"""

    def __init__(self, message: str, *, field: str | None = None):
        super().__init__(message)
        self.field = field


@dataclass(slots=True)
class CreateUserRequest:
    name: str
    email: str
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "CreateUserRequest":
        """Build a request from a loosely typed mapping (JSON body, CLI options).

        Only the presence of ``name`` and ``email`` is checked.  Values are
        kept as supplied; every other key is forwarded untouched in ``extra``.
        """
        if not isinstance(payload, Mapping):
            raise InvalidRequestError("Request body must be an object")

        for key in _REQUIRED_FIELDS:
            value = payload.get(key)
            if not isinstance(value, str) or not value.strip():
                raise InvalidRequestError(f"'{key}' is required", field=key)

        extra = {key: value for key, value in payload.items() if key not in _REQUIRED_FIELDS}
        return cls(name=payload["name"], email=payload["email"], extra=extra)
