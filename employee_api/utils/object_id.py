# employee_api/utils/object_id.py
from bson import ObjectId, errors

from employee_api.errors import InvalidEmployeeIdError

def parse_object_id(employee_id: str) -> ObjectId:
    """Convert a path identifier into an ObjectId.

    Raises InvalidEmployeeIdError for anything that is not 24 hex characters.
    """
    try:
        return ObjectId(employee_id)
    except (errors.InvalidId, TypeError):
        raise InvalidEmployeeIdError(employee_id)
