"""Entity <-> DTO mapping functions."""

from .profile import map_company_for_creation, map_company_to_dto, map_employee_for_creation, map_employee_to_dto

__all__ = [
    "map_company_for_creation",
    "map_company_to_dto",
    "map_employee_for_creation",
    "map_employee_to_dto",
]
