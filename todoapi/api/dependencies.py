"""
FastAPI dependencies for the todo handlers.

The store is built once by the application factory and kept on
``app.state.database``; every request gets its own session on it.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from todoapi.models.database import Database
from todoapi.repositories.todo_repository import TodoRepository


def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_db(database: Annotated[Database, Depends(get_database)]) -> AsyncGenerator[Session, None]:
    db = database.session()
    try:
        yield db
    finally:
        db.close()


async def get_todo_repository(db: Annotated[Session, Depends(get_db)]) -> AsyncGenerator[TodoRepository, None]:
    yield TodoRepository(db)


TodoRepositoryDep = Annotated[TodoRepository, Depends(get_todo_repository)]
