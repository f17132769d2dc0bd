from types import SimpleNamespace

from app.schemas.todo import TodoOut


def test_todo_out_reads_orm_attributes():
    row = SimpleNamespace(id=7, text="buy milk", completed=False)
    assert TodoOut.model_validate(row).model_dump() == {"text": "buy milk", "id": 7, "completed": False}
