"""Abstract repository for Company entities."""

from abc import ABC, abstractmethod
from uuid import UUID

from domain.entities import Company


class CompanyRepository(ABC):
    """Abstract repository for Company entities.

    ``track_changes`` selects the retrieval mode: when True the repository
    hands out the stored instance so that mutations are picked up by
    ``RepositoryManager.save_async``; when False it hands out a detached copy.
    """

    @abstractmethod
    async def get_all_companies_async(self, track_changes: bool) -> list[Company]:
        """Retrieve all companies ordered by name."""
        pass

    @abstractmethod
    async def get_company_async(self, company_id: UUID, track_changes: bool) -> Company | None:
        """Retrieve a company by ID."""
        pass

    @abstractmethod
    async def create_company_async(self, company: Company) -> None:
        """Add a new company together with its employees."""
        pass

    @abstractmethod
    async def delete_company_async(self, company: Company) -> None:
        """Remove a company and its employees."""
        pass
