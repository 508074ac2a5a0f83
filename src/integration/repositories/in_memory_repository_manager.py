"""In-memory implementation of RepositoryManager."""

import logging
from typing import Callable

from domain.repositories import CompanyRepository, EmployeeRepository, RepositoryManager

from .in_memory_company_repository import InMemoryCompanyRepository
from .in_memory_data_store import InMemoryDataStore
from .in_memory_employee_repository import InMemoryEmployeeRepository

log = logging.getLogger(__name__)


class InMemoryRepositoryManager(RepositoryManager):
    """Unit of work over an InMemoryDataStore.

    Repositories are created on first access. Entities retrieved with
    ``track_changes=True`` are the stored instances, so their mutations need
    no flushing; staged additions and removals are applied by ``save_async``
    in the order they were staged.
    """

    def __init__(self, store: InMemoryDataStore | None = None) -> None:
        self.store = store if store is not None else InMemoryDataStore()
        self._pending: list[Callable[[], None]] = []
        self._company_repository: CompanyRepository | None = None
        self._employee_repository: EmployeeRepository | None = None

    @property
    def company(self) -> CompanyRepository:
        if self._company_repository is None:
            self._company_repository = InMemoryCompanyRepository(self.store, self._pending.append)
        return self._company_repository

    @property
    def employee(self) -> EmployeeRepository:
        if self._employee_repository is None:
            self._employee_repository = InMemoryEmployeeRepository(self.store, self._pending.append)
        return self._employee_repository

    @property
    def has_pending_changes(self) -> bool:
        return bool(self._pending)

    async def save_async(self) -> None:
        changes = list(self._pending)
        self._pending.clear()
        for change in changes:
            change()
        log.debug(f"Committed {len(changes)} staged change(s)")
