"""
Owner identity for saved records.

Jobs carry a `poster` and events an `organizer`. There is no login, so the
only provider available returns fixed ids from configuration. Anything that
can answer "who is saving this?" can replace it.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.board.resources import ResourceSchema


class OwnerProvider(ABC):
    """Supplies the owner id injected into a resource's outgoing payload."""

    @abstractmethod
    def owner_id(self, schema: ResourceSchema) -> Optional[str]:
        """Return the owner id for `schema`, or None when it has no owner field."""
        pass


class PlaceholderOwnerProvider(OwnerProvider):
    """
    Returns the same configured id for every save.

    Stands in for an authenticated user until one exists.
    """

    def __init__(self, poster_id: str, organizer_id: str):
        self._ids = {"poster": poster_id, "organizer": organizer_id}

    def owner_id(self, schema: ResourceSchema) -> Optional[str]:
        if not schema.owner_field:
            return None
        return self._ids.get(schema.owner_field)

    @classmethod
    def from_config(cls) -> "PlaceholderOwnerProvider":
        from src.common.config import Config
        return cls(poster_id=Config.POSTER_ID, organizer_id=Config.ORGANIZER_ID)
