from pydantic import BaseModel


class MessageModel(BaseModel):  # type: ignore[misc]
    message: str
