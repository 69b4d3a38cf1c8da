# employee_api/errors.py


class EmployeeError(Exception):
    """Base class for failures raised by the employee persistence layer."""

    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidEmployeeIdError(EmployeeError):
    """The identifier is not a 24 character hexadecimal ObjectId."""

    http_status = 400

    def __init__(self, employee_id: str):
        super().__init__(
            f"invalid employee ID format: '{employee_id}' is not a valid ObjectId"
        )
        self.employee_id = employee_id


class EmployeeNotFoundError(EmployeeError):
    http_status = 404

    def __init__(self, employee_id: str):
        super().__init__(f"no employee found with ID: {employee_id}")
        self.employee_id = employee_id


class EmployeeStoreError(EmployeeError):
    """The database rejected or failed an operation."""

    http_status = 500
