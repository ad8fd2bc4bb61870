"""
Relational store for the tasks table.
Every operation is one SQL statement run in its own transaction on a pooled connection.
"""
import contextlib
import logging
from typing import List, Optional

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    create_engine,
    delete,
    false,
    func,
    insert,
    not_,
    select,
    text,
    update,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from errors import NotFoundError, StoreError, ValidationError
from models import Task
from utils import as_utc, utc_now

logger = logging.getLogger(__name__)

metadata = MetaData()

tasks_table = Table(
    "tasks",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(255), nullable=False),
    Column("description", Text),
    Column("completed", Boolean, nullable=False, default=False, server_default=false()),
    # Set by TaskStore.create; the server default covers rows inserted elsewhere
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
)


def make_engine(database_url: str) -> Engine:
    """Create the shared engine (and its connection pool) for a database URL"""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Sync FastAPI endpoints run in a threadpool
        connect_args["check_same_thread"] = False
    return create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)


@contextlib.contextmanager
def _store_errors(message: str):
    """Log database failures server-side and re-raise them as StoreError"""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("❌ %s", message)
        raise StoreError(message) from exc


def _require_title(title: Optional[str]):
    if not title:
        raise ValidationError("Title is required")


class TaskStore:
    """CRUD over the tasks table"""

    def __init__(self, engine: Engine):
        self.engine = engine

    @classmethod
    def from_url(cls, database_url: str) -> "TaskStore":
        return cls(make_engine(database_url))

    # --- lifecycle ---

    def check_connection(self, log_success: bool = True) -> bool:
        """Log whether a pooled connection can be opened. Never raises."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError:
            logger.exception("❌ Error connecting to the database")
            return False
        if log_success:
            logger.info("✓ Database connected successfully!")
        return True

    def initialize(self) -> bool:
        """Create the tasks table if it is missing. Never raises."""
        try:
            metadata.create_all(self.engine, checkfirst=True)
        except SQLAlchemyError:
            logger.exception("❌ Error initializing database")
            return False
        logger.info("✓ Database initialized successfully")
        return True

    def dispose(self):
        self.engine.dispose()

    # --- operations ---

    def create(self, title: Optional[str], description: Optional[str] = None) -> int:
        """Insert a new, not yet completed task and return its id"""
        _require_title(title)
        stmt = insert(tasks_table).values(
            title=title,
            description=description or "",
            completed=False,
            created_at=utc_now().replace(tzinfo=None),
        )
        with _store_errors("Failed to add task"):
            with self.engine.begin() as conn:
                result = conn.execute(stmt)
        task_id = result.inserted_primary_key[0]
        return task_id

    def list_all(self) -> List[Task]:
        """All tasks, newest first"""
        stmt = select(tasks_table).order_by(
            tasks_table.c.created_at.desc(), tasks_table.c.id.desc()
        )
        with _store_errors("Failed to fetch tasks"):
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
        return [
            Task(
                id=row["id"],
                title=row["title"],
                description=row["description"] or "",
                completed=bool(row["completed"]),
                created_at=as_utc(row["created_at"]),
            )
            for row in rows
        ]

    def update(self, task_id: int, title: Optional[str], description: Optional[str] = None):
        """Overwrite title and description of an existing task"""
        _require_title(title)
        stmt = (
            update(tasks_table)
            .where(tasks_table.c.id == task_id)
            .values(title=title, description=description or "")
        )
        self._execute_on_one(stmt, "Failed to update task")

    def delete(self, task_id: int):
        stmt = delete(tasks_table).where(tasks_table.c.id == task_id)
        self._execute_on_one(stmt, "Failed to delete task")

    def toggle_completed(self, task_id: int):
        """Flip completed in place with a single UPDATE ... SET completed = NOT completed"""
        stmt = (
            update(tasks_table)
            .where(tasks_table.c.id == task_id)
            .values(completed=not_(tasks_table.c.completed))
        )
        self._execute_on_one(stmt, "Failed to update task status")

    def _execute_on_one(self, stmt, error_message: str):
        with _store_errors(error_message):
            with self.engine.begin() as conn:
                result = conn.execute(stmt)
        # MySQL dialect counts matched rows (FOUND_ROWS), so unchanged updates still count
        if result.rowcount == 0:
            raise NotFoundError("Task not found")
