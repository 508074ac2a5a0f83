"""Company entity."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

from domain.entities.employee import Employee


@dataclass
class Company:
    """A company and the employees it owns.

    Employees are owned by the company: deleting a company deletes them too.
    """

    name: str
    address: str
    country: str | None = None
    id: UUID = field(default_factory=uuid4)
    employees: list[Employee] = field(default_factory=list)

    def update(self, name: str, address: str, country: str | None) -> None:
        """Replace the company's descriptive fields."""
        self.name = name
        self.address = address
        self.country = country

    def add_employee(self, employee: Employee) -> Employee:
        """Attach an employee to this company."""
        employee.company_id = self.id
        self.employees.append(employee)
        return employee
