"""Employee data transfer objects."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class EmployeeDto:
    """Read representation of an Employee."""

    id: UUID
    name: str
    age: int
    position: str


@dataclass(frozen=True)
class EmployeeForCreationDto:
    name: str
    age: int
    position: str


@dataclass(frozen=True)
class EmployeeForUpdateDto:
    name: str
    age: int
    position: str
