"""Process-wide in-memory store backing the repositories."""

import copy
from typing import TypeVar
from uuid import UUID

from domain.entities import Company

T = TypeVar("T")


class InMemoryDataStore:
    """Holds every company keyed by ID; employees live inside their company."""

    def __init__(self) -> None:
        self.companies: dict[UUID, Company] = {}

    def clear(self) -> None:
        self.companies.clear()


def detach(entity: T, track_changes: bool) -> T:
    """Return the stored instance when tracking, otherwise a deep copy of it."""
    if track_changes:
        return entity
    return copy.deepcopy(entity)
