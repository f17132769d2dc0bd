from sqlalchemy import delete as sa_delete, insert as sa_insert, not_, select, update as sa_update
from sqlalchemy.ext.asyncio import AsyncSession
from app.models.todo import Todo

class TodoRepository:
    """One SQL statement per operation; writes commit before returning."""

    async def list(self, db: AsyncSession) -> list[Todo]:
        result = await db.execute(select(Todo).order_by(Todo.id.asc()))
        return list(result.scalars().all())

    async def get(self, db: AsyncSession, todo_id: int) -> Todo | None:
        result = await db.execute(select(Todo).where(Todo.id == todo_id))
        return result.scalar_one_or_none()

    async def create(self, db: AsyncSession, text: str) -> Todo:
        stmt = sa_insert(Todo).values(text=text, completed=False).returning(Todo)
        result = await db.execute(stmt)
        todo = result.scalar_one()
        await db.commit()
        return todo

    async def update_text(self, db: AsyncSession, todo_id: int, text: str) -> Todo | None:
        stmt = (
            sa_update(Todo)
            .where(Todo.id == todo_id)
            .values(text=text)
            .returning(Todo)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        todo = result.scalar_one_or_none()
        await db.commit()
        return todo

    async def toggle_completed(self, db: AsyncSession, todo_id: int) -> Todo | None:
        # the flip happens inside the UPDATE; a separate read would lose
        # concurrent toggles
        stmt = (
            sa_update(Todo)
            .where(Todo.id == todo_id)
            .values(completed=not_(Todo.completed))
            .returning(Todo)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        todo = result.scalar_one_or_none()
        await db.commit()
        return todo

    async def delete(self, db: AsyncSession, todo_id: int) -> bool:
        result = await db.execute(sa_delete(Todo).where(Todo.id == todo_id))
        await db.commit()
        return (result.rowcount or 0) > 0
