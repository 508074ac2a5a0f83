"""Mappings between domain entities and DTOs."""

from domain.entities import Company, Employee
from integration.models import CompanyDto, CompanyForCreationDto, EmployeeDto, EmployeeForCreationDto


def map_company_to_dto(company: Company) -> CompanyDto:
    return CompanyDto(id=company.id, name=company.name, address=company.address, country=company.country)


def map_employee_to_dto(employee: Employee) -> EmployeeDto:
    return EmployeeDto(id=employee.id, name=employee.name, age=employee.age, position=employee.position)


def map_employee_for_creation(employee: EmployeeForCreationDto) -> Employee:
    return Employee(name=employee.name, age=employee.age, position=employee.position)


def map_company_for_creation(company: CompanyForCreationDto) -> Company:
    """Build a new Company entity, including any employees listed in the payload."""
    entity = Company(name=company.name, address=company.address, country=company.country)
    for employee in company.employees:
        entity.add_employee(map_employee_for_creation(employee))
    return entity
