"""Abstract repository interface (port) for thumbnail records."""

from abc import ABC, abstractmethod

from newsroom.domain.entities import Thumbnail


class ThumbnailRepository(ABC):
    """Port for thumbnail persistence."""

    @abstractmethod
    async def create(self, thumbnail: Thumbnail) -> Thumbnail:
        """Persist a thumbnail record and return it with the generated ID."""
        ...
