# employee_api/repository.py
import logging
from typing import List

from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from employee_api.errors import EmployeeNotFoundError, EmployeeStoreError
from employee_api.models.employee import EmployeeModel
from employee_api.schemas.employee import EmployeeBase
from employee_api.utils.object_id import parse_object_id

logger = logging.getLogger(__name__)


class EmployeeRepository:
    """CRUD operations on the employee collection.

    Every call goes straight to the store; nothing is cached between calls.
    Driver failures surface as EmployeeStoreError, malformed identifiers as
    InvalidEmployeeIdError.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def list_all(self) -> List[EmployeeModel]:
        try:
            documents = await self.collection.find({}).to_list(length=None)
        except PyMongoError as e:
            logger.warning("Listing employees failed: %s", e)
            raise EmployeeStoreError(f"error finding employees: {e}") from e
        try:
            return [EmployeeModel.from_document(document) for document in documents]
        except ValidationError as e:
            logger.warning("Decoding employee failed: %s", e)
            raise EmployeeStoreError(f"error decoding employee: {e}") from e

    async def insert(self, employee: EmployeeBase) -> str:
        document = employee.model_dump()
        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as e:
            logger.warning("Inserting employee failed: %s", e)
            raise EmployeeStoreError(f"error inserting employee: {e}") from e
        employee_id = str(result.inserted_id)
        logger.info("Inserted 1 employee with id: %s", employee_id, extra={"employee_id": employee_id})
        return employee_id

    async def update_by_id(self, employee_id: str, employee: EmployeeBase) -> int:
        """Replace the business fields of one employee.

        Returns the number of matched documents. A well-formed identifier that
        matches nothing is not an error: the result is simply 0.
        """
        oid = parse_object_id(employee_id)
        try:
            result = await self.collection.update_one(
                {"_id": oid},
                {"$set": employee.model_dump()},
            )
        except PyMongoError as e:
            logger.warning("Updating employee %s failed: %s", employee_id, e)
            raise EmployeeStoreError(f"error updating employee: {e}") from e
        logger.info(
            "Updated employee with id: %s (matched=%d, modified=%d)",
            employee_id, result.matched_count, result.modified_count,
            extra={"employee_id": employee_id},
        )
        return result.matched_count

    async def delete_by_id(self, employee_id: str) -> None:
        oid = parse_object_id(employee_id)
        try:
            result = await self.collection.delete_one({"_id": oid})
        except PyMongoError as e:
            logger.warning("Deleting employee %s failed: %s", employee_id, e)
            raise EmployeeStoreError(f"error deleting employee: {e}") from e
        if result.deleted_count == 0:
            raise EmployeeNotFoundError(employee_id)
        logger.info("Successfully deleted employee with ID: %s", employee_id, extra={"employee_id": employee_id})
