from typing import Annotated, List

from fastapi import APIRouter, Path, Response, status

from todoapi.api.dependencies import TodoRepositoryDep
from todoapi.core.exceptions import TodoNotFoundError
from todoapi.models.domain.todo import TodoItemView, to_view

router = APIRouter(prefix="/todoitems", tags=["todoitems"])

# Ids are stored as SQLite INTEGER (signed 64-bit); larger values cannot be queried
TodoId = Annotated[int, Path(ge=-2**63, le=2**63 - 1)]


@router.get('', response_model=List[TodoItemView], include_in_schema=False)
@router.get('/', response_model=List[TodoItemView])
async def get_all_todos(repository: TodoRepositoryDep):
    return [to_view(todo) for todo in await repository.list_all()]


@router.get('/complete', response_model=List[TodoItemView])
async def get_complete_todos(repository: TodoRepositoryDep):
    return [to_view(todo) for todo in await repository.list_where_complete()]


@router.get('/{id}', response_model=TodoItemView)
async def get_todo(id: TodoId, repository: TodoRepositoryDep):
    todo = await repository.find_by_id(id)
    if todo is None:
        raise TodoNotFoundError(id)
    return to_view(todo)


@router.post('', response_model=TodoItemView, status_code=status.HTTP_201_CREATED, include_in_schema=False)
@router.post('/', response_model=TodoItemView, status_code=status.HTTP_201_CREATED)
async def create_todo(todo_item: TodoItemView, response: Response, repository: TodoRepositoryDep):
    # Any id in the body is ignored; the store assigns it
    todo = await repository.insert(todo_item.name, todo_item.is_complete)
    response.headers["Location"] = f"/todoitems/{todo.id}"
    return to_view(todo)


@router.put('/{id}', status_code=status.HTTP_204_NO_CONTENT)
async def update_todo(id: TodoId, todo_item: TodoItemView, repository: TodoRepositoryDep):
    if not await repository.update(id, todo_item.name, todo_item.is_complete):
        raise TodoNotFoundError(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete('/{id}', status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(id: TodoId, repository: TodoRepositoryDep):
    if not await repository.delete(id):
        raise TodoNotFoundError(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
