from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Category:
    """Named bucket articles are filed under. Names are unique."""

    name: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
