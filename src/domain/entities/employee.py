"""Employee entity."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass
class Employee:
    """An employee working for exactly one company."""

    name: str
    age: int
    position: str
    company_id: UUID | None = None
    id: UUID = field(default_factory=uuid4)

    def update(self, name: str, age: int, position: str) -> None:
        self.name = name
        self.age = age
        self.position = position
