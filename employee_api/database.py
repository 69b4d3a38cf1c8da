# employee_api/database.py
import asyncio
import logging

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import ConnectionFailure, PyMongoError

from employee_api.config import Settings
from employee_api.repository import EmployeeRepository

logger = logging.getLogger(__name__)

async def connect_to_mongo(settings: Settings) -> AsyncIOMotorClient:
    client = AsyncIOMotorClient(settings.MONGODB_URI)
    try:
        await asyncio.wait_for(
            client.admin.command("ping"), timeout=settings.MONGODB_PING_TIMEOUT
        )
    except (asyncio.TimeoutError, PyMongoError) as e:
        client.close()
        raise ConnectionFailure(f"MongoDB ping error: {e}") from e
    logger.info("Connected to MongoDB: %s", settings.MONGODB_DB_NAME)
    return client

def close_mongo_connection(client: AsyncIOMotorClient) -> None:
    if client:
        client.close()
        logger.info("Closed MongoDB connection")

def get_collection(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorCollection:
    return client[settings.MONGODB_DB_NAME][settings.MONGODB_COLLECTION_NAME]

def get_employee_repository(request: Request) -> EmployeeRepository:
    return request.app.state.employee_repository
