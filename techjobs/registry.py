"""
Entity registry.

Interns entities of one type by case-insensitive name so that every job
referring to "the same" employer (or location, ...) shares one instance.
"""

from typing import Callable, Dict, Generic, List, TypeVar

from .models import NamedEntity
from .normalize import name_key

E = TypeVar("E", bound=NamedEntity)


class EntityRegistry(Generic[E]):
    """Insertion-ordered map from normalized name to entity."""

    def __init__(self, factory: Callable[[str], E]):
        self._factory = factory
        self._entities: Dict[str, E] = {}

    def __len__(self) -> int:
        return len(self._entities)

    def intern(self, name: str) -> E:
        """Return the registered entity for name, creating it on first sight.

        The first spelling seen wins: later rows that differ only in case
        reuse the original instance and its original name.
        """
        key = name_key(name)
        entity = self._entities.get(key)
        if entity is None:
            entity = self._factory(name)
            self._entities[key] = entity
        return entity

    def in_order(self) -> List[E]:
        """Entities in first-seen order."""
        return list(self._entities.values())

    def sorted(self) -> List[E]:
        """A copy sorted by name; ties keep first-seen order."""
        return sorted(self._entities.values(), key=lambda e: e.name)
