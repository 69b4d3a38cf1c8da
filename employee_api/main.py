# employee_api/main.py
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from employee_api.routes import employee_router
from employee_api.database import connect_to_mongo, close_mongo_connection, get_collection
from employee_api.error_handlers import register_error_handlers
from employee_api.observability import setup_logging
from employee_api.repository import EmployeeRepository
from employee_api.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    client = await connect_to_mongo(settings)
    app.state.employee_repository = EmployeeRepository(get_collection(client, settings))
    logger.info("Employee Management API started")
    yield
    # Shutdown
    close_mongo_connection(client)

app = FastAPI(title="Employee Management API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

register_error_handlers(app)

app.include_router(employee_router, prefix=settings.API_PREFIX, tags=["employees"])

@app.get("/")
async def root():
    return {"message": "Welcome to the Employee Management API"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "employee_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
