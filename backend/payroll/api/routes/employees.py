"""Employee Resource — CRUD over /employees returning hypermedia documents.

Invariants:
    - Single-employee documents carry self + employees links; the collection carries self
    - POST returns 201 with Location /employees/{id}
    - PUT upserts: existing id is updated in place (name, role), absent id is created
    - DELETE is idempotent: 204 whether or not the employee existed
    - Missing employee on GET raises EmployeeNotFoundError (rendered centrally as 404)
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from payroll.api.dependencies import (
    EntityIdPath, get_employee_assembler, get_employee_repository, get_uri_builder,
)
from payroll.core.assembler import EmployeeModelAssembler
from payroll.core.domain_types import EmployeeId
from payroll.core.entities import Employee
from payroll.core.errors import EmployeeNotFoundError
from payroll.core.repository_protocols import EmployeeRepository
from payroll.core.uri_builder import Route, UriBuilder
from payroll.schemas.employee import EmployeeBody

logger = logging.getLogger(__name__)
router = APIRouter(tags=["employees"])


async def get_employee_or_404(
    employee_id: int, repository: EmployeeRepository,
) -> Employee:
    employee = await repository.find_by_id(EmployeeId(employee_id))
    if employee is None:
        raise EmployeeNotFoundError(employee_id)
    return employee


@router.get(Route.EMPLOYEES.value)
async def all_employees(
    repository: EmployeeRepository = Depends(get_employee_repository),
    assembler: EmployeeModelAssembler = Depends(get_employee_assembler),
):
    """List every employee as an embedded collection."""
    return assembler.to_collection_model(await repository.find_all())


@router.post(Route.EMPLOYEES.value, status_code=status.HTTP_201_CREATED)
async def new_employee(
    body: EmployeeBody,
    response: Response,
    repository: EmployeeRepository = Depends(get_employee_repository),
    assembler: EmployeeModelAssembler = Depends(get_employee_assembler),
    uris: UriBuilder = Depends(get_uri_builder),
):
    """Create an employee; the store assigns the id."""
    saved = await repository.save(body.to_entity())
    logger.info(f"Created {saved}", extra={"employee_id": saved.id})
    response.headers["Location"] = uris.build(Route.EMPLOYEE, employee_id=saved.id)
    return assembler.to_model(saved)


@router.get(Route.EMPLOYEE.value)
async def one_employee(
    employee_id: EntityIdPath,
    repository: EmployeeRepository = Depends(get_employee_repository),
    assembler: EmployeeModelAssembler = Depends(get_employee_assembler),
):
    employee = await get_employee_or_404(employee_id, repository)
    return assembler.to_model(employee)


@router.put(Route.EMPLOYEE.value)
async def replace_employee(
    employee_id: EntityIdPath,
    body: EmployeeBody,
    repository: EmployeeRepository = Depends(get_employee_repository),
    assembler: EmployeeModelAssembler = Depends(get_employee_assembler),
):
    """Replace name and role of an employee, creating it at this id if absent."""
    employee = await repository.find_by_id(EmployeeId(employee_id))
    if employee is not None:
        employee.first_name = body.first_name
        employee.last_name = body.last_name
        employee.role = body.role
        logger.info(f"Updating {employee}", extra={"employee_id": employee_id})
    else:
        employee = body.to_entity(EmployeeId(employee_id))
        logger.info(f"Inserting {employee}", extra={"employee_id": employee_id})
    saved = await repository.save(employee)
    return assembler.to_model(saved)


@router.delete(
    Route.EMPLOYEE.value,
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_employee(
    employee_id: EntityIdPath,
    repository: EmployeeRepository = Depends(get_employee_repository),
):
    await repository.delete_by_id(EmployeeId(employee_id))
    logger.info("Deleted employee", extra={"employee_id": employee_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
