"""
Daily Planner Task Service
Thin CRUD API over the tasks table
"""
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

import config
from errors import NotFoundError, PlannerServiceError
from models import Message, Task, TaskCreated, TaskIn
from task_store import TaskStore

logger = logging.getLogger(__name__)

BANNER = "Daily Planner Backend is running!"

# Signed 32-bit INT, the type of tasks.id
MIN_TASK_ID = -2**31
MAX_TASK_ID = 2**31 - 1

router = APIRouter()


def get_store(request: Request) -> TaskStore:
    return request.app.state.store


def parse_task_id(raw: str) -> int:
    """Ids that are not integers in the INT column range cannot match any row"""
    try:
        task_id = int(raw)
    except ValueError:
        raise NotFoundError("Task not found") from None
    if not MIN_TASK_ID <= task_id <= MAX_TASK_ID:
        raise NotFoundError("Task not found")
    return task_id


@router.get("/", response_class=PlainTextResponse)
def root():
    """Banner endpoint"""
    return BANNER


@router.get("/health")
def health(store: TaskStore = Depends(get_store)):
    """Detailed health check"""
    return {
        "status": "healthy",
        "service": "Daily Planner Task Service",
        "database_connected": store.check_connection(log_success=False),
    }


@router.post("/add-task", status_code=201, response_model=TaskCreated)
def add_task(payload: Optional[TaskIn] = None, store: TaskStore = Depends(get_store)):
    payload = payload or TaskIn()
    task_id = store.create(payload.title, payload.description)
    logger.info("📝 Added task %s", task_id)
    return TaskCreated(message="Task added successfully!", taskId=task_id)


@router.get("/tasks", response_model=List[Task])
def list_tasks(store: TaskStore = Depends(get_store)):
    return store.list_all()


@router.put("/tasks/{task_id}", response_model=Message)
def update_task(
    task_id: str,
    payload: Optional[TaskIn] = None,
    store: TaskStore = Depends(get_store),
):
    payload = payload or TaskIn()
    store.update(parse_task_id(task_id), payload.title, payload.description)
    return Message(message="Task updated successfully")


@router.delete("/tasks/{task_id}", response_model=Message)
def delete_task(task_id: str, store: TaskStore = Depends(get_store)):
    store.delete(parse_task_id(task_id))
    return Message(message="Task deleted successfully")


@router.patch("/tasks/{task_id}/toggle", response_model=Message)
def toggle_task(task_id: str, store: TaskStore = Depends(get_store)):
    store.toggle_completed(parse_task_id(task_id))
    return Message(message="Task status updated successfully")


async def service_error_handler(request: Request, exc: PlannerServiceError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info("⚠️  Rejected malformed request to %s", request.url.path)
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


def create_app(store: Optional[TaskStore] = None) -> FastAPI:
    """
    Build the API around a TaskStore (defaults to config.DATABASE_URL).
    Startup checks connectivity and bootstraps the schema; failures are logged, not fatal.
    """
    if store is None:
        store = TaskStore.from_url(config.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store.check_connection()
        store.initialize()
        yield
        store.dispose()

    app = FastAPI(title="Daily Planner Task Service", lifespan=lifespan)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"], allow_methods=["*"], allow_headers=["*"],
    )
    app.add_exception_handler(PlannerServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    from utils import setup_logging

    setup_logging(config.LOG_LEVEL)
    logger.info("🚀 Server is running on http://localhost:%s", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)
