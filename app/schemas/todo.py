from pydantic import BaseModel, ConfigDict, StrictStr

class TodoBase(BaseModel):
    text: StrictStr

class TodoCreate(TodoBase):
    pass

class TodoUpdate(TodoBase):
    pass

class TodoOut(TodoBase):
    id: int
    completed: bool
    model_config = ConfigDict(from_attributes=True)

class MessageOut(BaseModel):
    message: str
