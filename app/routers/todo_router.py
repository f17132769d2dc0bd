from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import InvalidTodoId
from app.schemas.todo import MessageOut, TodoCreate, TodoOut, TodoUpdate
from app.services.todo_service import TodoService
from app.database import get_db

# ids are SERIAL (int4) columns
MAX_TODO_ID = 2**31 - 1

router = APIRouter()
service = TodoService()


def parse_todo_id(todo_id: str) -> int:
    """Turn the ``{todo_id}`` path segment into an int or reject the request.

    Runs as the first dependency of every id-scoped route, so a bad id is
    answered with 400 before any statement is issued. A body that is not
    JSON at all is still rejected first, also with 400.
    """
    raw = todo_id[1:] if todo_id.startswith("+") else todo_id
    if not raw or not (raw.isascii() and raw.isdigit()):
        raise InvalidTodoId()
    value = int(raw)
    if value > MAX_TODO_ID:
        raise InvalidTodoId()
    return value


@router.get("", response_model=list[TodoOut])
async def list_todos(db: AsyncSession = Depends(get_db)):
    return await service.list_todos(db)

@router.post("", response_model=TodoOut, status_code=201)
async def create_todo(todo_in: TodoCreate, db: AsyncSession = Depends(get_db)):
    return await service.create_todo(db, todo_in)

@router.get("/{todo_id}", response_model=TodoOut)
async def get_todo(todo_id: int = Depends(parse_todo_id), db: AsyncSession = Depends(get_db)):
    return await service.get_todo(db, todo_id)

@router.patch("/{todo_id}", response_model=TodoOut)
async def toggle_todo(todo_id: int = Depends(parse_todo_id), db: AsyncSession = Depends(get_db)):
    return await service.toggle_todo(db, todo_id)

@router.put("/{todo_id}", response_model=TodoOut)
async def update_todo(
    todo_in: TodoUpdate,
    todo_id: int = Depends(parse_todo_id),
    db: AsyncSession = Depends(get_db),
):
    return await service.update_todo(db, todo_id, todo_in)

@router.delete("/{todo_id}", response_model=MessageOut)
async def delete_todo(todo_id: int = Depends(parse_todo_id), db: AsyncSession = Depends(get_db)):
    await service.delete_todo(db, todo_id)
    return {"message": "Todo deleted successfully"}
