"""Employees API controller.

Nested under a company. Unlike the companies controller, it calls
``EmployeeService`` directly instead of going through the dispatcher.
"""

from typing import Optional
from uuid import UUID

from classy_fastapi.decorators import delete, get, post, put
from fastapi import Body, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from application.services import EmployeeService
from integration.models import EmployeeForCreationDto, EmployeeForUpdateDto

from .controller_base import ControllerBase

# ============================================================================
# REQUEST / RESPONSE MODELS
# ============================================================================


class EmployeeForCreationRequest(BaseModel):
    """Request to create a new employee."""

    name: str = Field(..., max_length=30, description="Employee name")
    age: int = Field(..., ge=18, description="Employee age")
    position: str = Field(..., max_length=20, description="Employee position")

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Sam Raiden",
                "age": 26,
                "position": "Software developer",
            }
        }
    }

    def to_dto(self) -> EmployeeForCreationDto:
        return EmployeeForCreationDto(name=self.name, age=self.age, position=self.position)


class EmployeeForUpdateRequest(BaseModel):
    """Request to overwrite an employee."""

    name: str = Field(..., max_length=30)
    age: int = Field(..., ge=18)
    position: str = Field(..., max_length=20)

    def to_dto(self) -> EmployeeForUpdateDto:
        return EmployeeForUpdateDto(name=self.name, age=self.age, position=self.position)


class EmployeeResponse(BaseModel):
    id: UUID
    name: str
    age: int
    position: str


# ============================================================================
# CONTROLLER
# ============================================================================


class EmployeesController(ControllerBase):
    """Controller for the employees of a company."""

    def __init__(self, employee_service: EmployeeService) -> None:
        super().__init__(prefix="/companies/{company_id:uuid}/employees", tags=["Employees"])
        self.employee_service = employee_service

    @get("", response_model=list[EmployeeResponse])
    async def get_employees_for_company(self, company_id: UUID):
        """Get the employees of a company, ordered by name."""
        return await self.employee_service.get_employees_async(company_id, track_changes=False)

    @get("/{employee_id:uuid}", response_model=EmployeeResponse, name="GetEmployeeForCompany")
    async def get_employee_for_company(self, company_id: UUID, employee_id: UUID):
        return await self.employee_service.get_employee_async(company_id, employee_id, track_changes=False)

    @post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
    async def create_employee_for_company(self, request: Request, company_id: UUID, employee: Optional[EmployeeForCreationRequest] = Body(default=None)):
        """Create an employee for a company; 201 with a ``Location`` header."""
        employee = self.ensure_body(employee, "EmployeeForCreationDto")
        created = await self.employee_service.create_employee_for_company_async(company_id, employee.to_dto(), track_changes=False)

        location = request.app.url_path_for("GetEmployeeForCompany", company_id=str(company_id), employee_id=str(created.id))
        return JSONResponse(status_code=status.HTTP_201_CREATED, content=jsonable_encoder(created), headers={"Location": str(location)})

    @put("/{employee_id:uuid}", status_code=status.HTTP_204_NO_CONTENT)
    async def update_employee_for_company(self, company_id: UUID, employee_id: UUID, employee: Optional[EmployeeForUpdateRequest] = Body(default=None)):
        employee = self.ensure_body(employee, "EmployeeForUpdateDto")
        await self.employee_service.update_employee_for_company_async(
            company_id,
            employee_id,
            employee.to_dto(),
            company_track_changes=False,
            employee_track_changes=True,
        )
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @delete("/{employee_id:uuid}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_employee_for_company(self, company_id: UUID, employee_id: UUID):
        await self.employee_service.delete_employee_for_company_async(company_id, employee_id, track_changes=False)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
