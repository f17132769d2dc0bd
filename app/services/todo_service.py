from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from app.exceptions import DatastoreError, TodoNotFound
from app.models.todo import Todo
from app.repositories.todo_repo import TodoRepository
from app.schemas.todo import TodoCreate, TodoUpdate

class TodoService:
    def __init__(self, repo: TodoRepository | None = None):
        self.repo = repo or TodoRepository()

    async def list_todos(self, db: AsyncSession) -> list[Todo]:
        try:
            return await self.repo.list(db)
        except SQLAlchemyError as e:
            logger.exception(f"Error fetching todos: {e}")
            raise DatastoreError("Failed to fetch todos")

    async def get_todo(self, db: AsyncSession, todo_id: int) -> Todo:
        try:
            todo = await self.repo.get(db, todo_id)
        except SQLAlchemyError as e:
            logger.exception(f"Error fetching todo {todo_id}: {e}")
            raise DatastoreError("Failed to fetch todo")
        if todo is None:
            raise TodoNotFound()
        return todo

    async def create_todo(self, db: AsyncSession, todo_in: TodoCreate) -> Todo:
        try:
            return await self.repo.create(db, todo_in.text)
        except SQLAlchemyError as e:
            logger.exception(f"Error creating todo: {e}")
            raise DatastoreError("Failed to create todo")

    async def update_todo(self, db: AsyncSession, todo_id: int, todo_in: TodoUpdate) -> Todo:
        try:
            todo = await self.repo.update_text(db, todo_id, todo_in.text)
        except SQLAlchemyError as e:
            logger.exception(f"Error updating todo {todo_id}: {e}")
            raise DatastoreError("Failed to update todo")
        if todo is None:
            raise TodoNotFound()
        return todo

    async def toggle_todo(self, db: AsyncSession, todo_id: int) -> Todo:
        try:
            todo = await self.repo.toggle_completed(db, todo_id)
        except SQLAlchemyError as e:
            logger.exception(f"Error toggling todo {todo_id}: {e}")
            raise DatastoreError("Failed to update todo")
        if todo is None:
            raise TodoNotFound()
        return todo

    async def delete_todo(self, db: AsyncSession, todo_id: int) -> None:
        try:
            deleted = await self.repo.delete(db, todo_id)
        except SQLAlchemyError as e:
            logger.exception(f"Error deleting todo {todo_id}: {e}")
            raise DatastoreError("Failed to delete todo")
        if not deleted:
            raise TodoNotFound()
