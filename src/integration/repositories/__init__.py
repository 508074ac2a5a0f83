"""Repository implementations."""

from .in_memory_company_repository import InMemoryCompanyRepository
from .in_memory_data_store import InMemoryDataStore
from .in_memory_employee_repository import InMemoryEmployeeRepository
from .in_memory_repository_manager import InMemoryRepositoryManager

__all__ = [
    "InMemoryCompanyRepository",
    "InMemoryDataStore",
    "InMemoryEmployeeRepository",
    "InMemoryRepositoryManager",
]
