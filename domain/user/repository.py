from __future__ import annotations
from typing import Protocol, Optional
from .entities import User


class UserRepository(Protocol):
    """Persistence port for :class:`User`.

    The email comparison policy (case sensitivity etc.) belongs to the
    implementation.  ``save`` must raise on failure instead of returning a
    status flag.
    """

    def find_by_email(self, email: str) -> Optional[User]:
        ...

    def save(self, user: User) -> None:
        ...
