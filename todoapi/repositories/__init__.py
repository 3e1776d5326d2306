from todoapi.repositories.todo_repository import TodoRepository

__all__ = ["TodoRepository"]
