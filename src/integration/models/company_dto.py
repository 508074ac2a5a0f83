"""Company data transfer objects.

``CompanyDto`` is what the API returns; the ``*ForCreationDto`` and
``*ForUpdateDto`` records are the payloads carried by commands.
"""

from dataclasses import dataclass, field
from uuid import UUID

from .employee_dto import EmployeeForCreationDto


@dataclass(frozen=True)
class CompanyDto:
    """Read representation of a Company."""

    id: UUID
    name: str
    address: str
    country: str | None = None


@dataclass(frozen=True)
class CompanyForCreationDto:
    """Payload for creating a company, optionally with its first employees."""

    name: str
    address: str
    country: str | None = None
    employees: list[EmployeeForCreationDto] = field(default_factory=list)


@dataclass(frozen=True)
class CompanyForUpdateDto:
    """Payload for replacing a company; listed employees are added to it."""

    name: str
    address: str
    country: str | None = None
    employees: list[EmployeeForCreationDto] = field(default_factory=list)
