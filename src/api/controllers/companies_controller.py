"""Companies API controller.

Every endpoint turns the HTTP request into a command, query or notification
and hands it to the dispatcher:
- GET    /companies       -> GetCompaniesQuery
- GET    /companies/{id}  -> GetCompanyQuery
- POST   /companies       -> CreateCompanyCommand
- PUT    /companies/{id}  -> UpdateCompanyCommand
- DELETE /companies/{id}  -> CompanyDeletedNotification (published, not sent)
"""

from typing import Optional
from uuid import UUID

from classy_fastapi.decorators import delete, get, post, put
from fastapi import Body, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from application.commands import CreateCompanyCommand, UpdateCompanyCommand
from application.mediation import Dispatcher
from application.notifications import CompanyDeletedNotification
from application.queries import GetCompaniesQuery, GetCompanyQuery
from integration.models import CompanyDto, CompanyForCreationDto, CompanyForUpdateDto

from .controller_base import ControllerBase
from .employees_controller import EmployeeForCreationRequest

# ============================================================================
# REQUEST / RESPONSE MODELS
# ============================================================================


class CompanyForCreationRequest(BaseModel):
    """Request to create a new company."""

    name: str = Field(..., max_length=30, description="Company name")
    address: str = Field(..., max_length=60, description="Company address")
    country: Optional[str] = Field(default=None, description="Country the company is registered in")
    employees: list[EmployeeForCreationRequest] = Field(default_factory=list, description="Employees created together with the company")

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Acme",
                "address": "1 Main St",
                "country": "US",
            }
        }
    }

    def to_dto(self) -> CompanyForCreationDto:
        return CompanyForCreationDto(
            name=self.name,
            address=self.address,
            country=self.country,
            employees=[employee.to_dto() for employee in self.employees],
        )


class CompanyForUpdateRequest(BaseModel):
    """Request to overwrite a company; listed employees are added to it."""

    name: str = Field(..., max_length=30)
    address: str = Field(..., max_length=60)
    country: Optional[str] = None
    employees: list[EmployeeForCreationRequest] = Field(default_factory=list)

    def to_dto(self) -> CompanyForUpdateDto:
        return CompanyForUpdateDto(
            name=self.name,
            address=self.address,
            country=self.country,
            employees=[employee.to_dto() for employee in self.employees],
        )


class CompanyResponse(BaseModel):
    id: UUID
    name: str
    address: str
    country: Optional[str] = None


# ============================================================================
# CONTROLLER
# ============================================================================


class CompaniesController(ControllerBase):
    """Controller for company operations, backed by the dispatcher."""

    dispatched_requests = (GetCompaniesQuery, GetCompanyQuery, CreateCompanyCommand, UpdateCompanyCommand)
    """Request types this controller sends; each must have a handler at startup."""

    def __init__(self, dispatcher: Dispatcher) -> None:
        super().__init__(prefix="/companies", tags=["Companies"])
        self.dispatcher = dispatcher

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    @get("", response_model=list[CompanyResponse])
    async def get_companies(self):
        """Get all companies, ordered by name."""
        return await self.dispatcher.send_async(GetCompaniesQuery(track_changes=False))

    @get("/{company_id:uuid}", response_model=CompanyResponse, name="CompanyById")
    async def get_company(self, company_id: UUID):
        """Get a single company by ID."""
        return await self.dispatcher.send_async(GetCompanyQuery(company_id=company_id, track_changes=False))

    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================

    @post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
    async def create_company(self, request: Request, company: Optional[CompanyForCreationRequest] = Body(default=None)):
        """Create a company.

        Responds with 201 and a ``Location`` header pointing at the new company.
        """
        company = self.ensure_body(company, "CompanyForCreationDto")
        created: CompanyDto = await self.dispatcher.send_async(CreateCompanyCommand(company=company.to_dto()))

        location = request.app.url_path_for("CompanyById", company_id=str(created.id))
        return JSONResponse(status_code=status.HTTP_201_CREATED, content=jsonable_encoder(created), headers={"Location": str(location)})

    @put("/{company_id:uuid}", status_code=status.HTTP_204_NO_CONTENT)
    async def update_company(self, company_id: UUID, company: Optional[CompanyForUpdateRequest] = Body(default=None)):
        """Overwrite a company."""
        company = self.ensure_body(company, "CompanyForUpdateDto")
        await self.dispatcher.send_async(UpdateCompanyCommand(company_id=company_id, company=company.to_dto(), track_changes=True))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @delete("/{company_id:uuid}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_company(self, company_id: UUID):
        """Delete a company and its employees.

        The deletion is published as a notification, so the response is 204
        whether or not the company existed.
        """
        await self.dispatcher.publish_async(CompanyDeletedNotification(company_id=company_id, track_changes=False))
        return Response(status_code=status.HTTP_204_NO_CONTENT)
