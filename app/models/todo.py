from sqlalchemy import Boolean, Column, Integer, Text, false
from app.database import Base

class Todo(Base):
    __tablename__ = "todos"
    # sqlite would otherwise hand out a deleted row's id again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    text = Column(Text, nullable=False)
    completed = Column(Boolean, nullable=False, default=False, server_default=false())
