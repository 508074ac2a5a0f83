"""Queries and their handlers."""

from .get_companies_query import GetCompaniesQuery, GetCompaniesQueryHandler, GetCompanyQuery, GetCompanyQueryHandler

__all__ = [
    "GetCompaniesQuery",
    "GetCompaniesQueryHandler",
    "GetCompanyQuery",
    "GetCompanyQueryHandler",
]
