from typing import List, Optional
from sqlalchemy.orm import Session

from todoapi.models.entities.todo import Todo
from todoapi.repositories.base_repository import BaseRepository

class TodoRepository(BaseRepository[Todo]):
    """Store operations over the todos table. The only writer of ids."""

    def __init__(self, db: Session):
        super().__init__(db, Todo)

    async def insert(self, name: Optional[str], is_complete: bool) -> Todo:
        return await self.save(Todo(name=name, is_complete=is_complete))

    async def find_by_id(self, todo_id: int) -> Optional[Todo]:
        return await self.get_by_id(todo_id)

    async def list_all(self) -> List[Todo]:
        return await self.get_all()

    async def list_where_complete(self) -> List[Todo]:
        return (
            self.db.query(Todo)
            .filter(Todo.is_complete.is_(True))
            .order_by(Todo.id)
            .all()
        )

    async def update(self, todo_id: int, name: Optional[str], is_complete: bool) -> bool:
        todo = await self.get_by_id(todo_id)
        if todo is None:
            return False

        # id and secret are left as they are
        todo.name = name
        todo.is_complete = is_complete
        await self.save(todo)
        return True

    async def delete(self, todo_id: int) -> bool:
        todo = await self.get_by_id(todo_id)
        if todo is None:
            return False

        await self.remove(todo)
        return True
