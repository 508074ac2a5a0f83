"""Domain exceptions.

Each exception maps to exactly one HTTP status code in the API layer:
- NotFoundError and its subclasses -> 404
- ValidationError -> 400
"""

from uuid import UUID


class NotFoundError(Exception):
    """Base class for lookups that found nothing."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CompanyNotFoundError(NotFoundError):
    """Raised when a company id does not exist in the store."""

    def __init__(self, company_id: UUID) -> None:
        super().__init__(f"The company with id: {company_id} doesn't exist in the database.")
        self.company_id = company_id


class EmployeeNotFoundError(NotFoundError):
    """Raised when an employee id does not exist in the store."""

    def __init__(self, employee_id: UUID) -> None:
        super().__init__(f"Employee with id: {employee_id} doesn't exist in the database.")
        self.employee_id = employee_id


class ValidationError(Exception):
    """Raised when a request body is absent or malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
