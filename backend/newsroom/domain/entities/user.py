"""User identity — administrators are users carrying the ADMIN role."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

ROLE_ADMIN = "ADMIN"


@dataclass
class User:
    """Account that can sign in; ``roles`` holds role tags such as ``ADMIN``."""

    email: str
    password_hash: str
    roles: list[str] = field(default_factory=list)
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_admin(self) -> bool:
        return ROLE_ADMIN in self.roles


@dataclass
class Requester:
    """Identity decoded from a bearer token for the current request."""

    id: int
    email: str
    roles: list[str] = field(default_factory=list)

    @property
    def is_admin(self) -> bool:
        return ROLE_ADMIN in self.roles
