"""In-memory implementation of CompanyRepository."""

from typing import Callable
from uuid import UUID

from domain.entities import Company
from domain.repositories import CompanyRepository

from .in_memory_data_store import InMemoryDataStore, detach


class InMemoryCompanyRepository(CompanyRepository):
    """In-memory implementation of CompanyRepository.

    Additions and removals are staged through ``stage`` and only reach the
    store when the owning repository manager saves.
    """

    def __init__(self, store: InMemoryDataStore, stage: Callable[[Callable[[], None]], None]) -> None:
        self._store = store
        self._stage = stage

    async def get_all_companies_async(self, track_changes: bool) -> list[Company]:
        companies = sorted(self._store.companies.values(), key=lambda c: c.name)
        return [detach(company, track_changes) for company in companies]

    async def get_company_async(self, company_id: UUID, track_changes: bool) -> Company | None:
        company = self._store.companies.get(company_id)
        if company is None:
            return None
        return detach(company, track_changes)

    async def create_company_async(self, company: Company) -> None:
        for employee in company.employees:
            employee.company_id = company.id

        def apply() -> None:
            self._store.companies[company.id] = company

        self._stage(apply)

    async def delete_company_async(self, company: Company) -> None:
        def apply() -> None:
            self._store.companies.pop(company.id, None)

        self._stage(apply)
