from dataclasses import dataclass


@dataclass
class Thumbnail:
    """Preview image for an article; ``path`` points at the stored file."""

    path: str
    id: int | None = None
