"""Aggregate over the domain services."""

from domain.repositories import RepositoryManager
from infrastructure import LoggerManager

from .company_service import CompanyService
from .employee_service import EmployeeService


class ServiceManager:
    """Builds each domain service on first use over one repository manager and logger."""

    def __init__(self, repository: RepositoryManager, logger: LoggerManager) -> None:
        self._repository = repository
        self._logger = logger
        self._company_service: CompanyService | None = None
        self._employee_service: EmployeeService | None = None

    @property
    def company_service(self) -> CompanyService:
        if self._company_service is None:
            self._company_service = CompanyService(self._repository, self._logger)
        return self._company_service

    @property
    def employee_service(self) -> EmployeeService:
        if self._employee_service is None:
            self._employee_service = EmployeeService(self._repository, self._logger)
        return self._employee_service
