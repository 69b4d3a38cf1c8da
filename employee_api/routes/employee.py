# employee_api/routes/employee.py
import logging
from typing import List
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from employee_api.database import get_employee_repository
from employee_api.errors import EmployeeError
from employee_api.repository import EmployeeRepository
from employee_api.schemas.employee import EmployeeCreate, EmployeeUpdate, EmployeeOut, MessageOut, ErrorOut
from employee_api.validation import format_violations, validate_employee

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorOut},
    404: {"model": ErrorOut},
    500: {"model": ErrorOut},
}

def create_error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})

def store_error_response(action: str, exc: EmployeeError) -> JSONResponse:
    return create_error_response(exc.http_status, f"Failed to {action}: {exc.message}")

@router.get(
    "/employees",
    response_model=List[EmployeeOut],
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def get_employees(repository: EmployeeRepository = Depends(get_employee_repository)):
    try:
        employees = await repository.list_all()
    except EmployeeError as e:
        return store_error_response("retrieve employees", e)
    return [EmployeeOut.from_model(employee) for employee in employees]

@router.post("/employees", response_model=MessageOut, responses=ERROR_RESPONSES)
async def create_employee(
    employee: EmployeeCreate,
    repository: EmployeeRepository = Depends(get_employee_repository),
):
    violations = validate_employee(employee)
    if violations:
        return create_error_response(400, format_violations(violations))

    try:
        await repository.insert(employee)
    except EmployeeError as e:
        return store_error_response("insert employee", e)

    return {"message": "Employee created successfully"}

@router.put("/employees/{employee_id}", response_model=MessageOut, responses=ERROR_RESPONSES)
async def update_employee(
    employee_id: str,
    employee: EmployeeUpdate,
    repository: EmployeeRepository = Depends(get_employee_repository),
):
    violations = validate_employee(employee)
    if violations:
        return create_error_response(400, format_violations(violations))

    try:
        matched = await repository.update_by_id(employee_id, employee)
    except EmployeeError as e:
        return store_error_response("update employee", e)

    if matched == 0:
        logger.info("Update matched no employee with id: %s", employee_id)

    return {"message": "Employee updated successfully"}

@router.delete("/employees/{employee_id}", response_model=MessageOut, responses=ERROR_RESPONSES)
async def delete_employee(
    employee_id: str,
    repository: EmployeeRepository = Depends(get_employee_repository),
):
    try:
        await repository.delete_by_id(employee_id)
    except EmployeeError as e:
        return store_error_response("delete employee", e)

    return {"message": "Employee deleted successfully"}
