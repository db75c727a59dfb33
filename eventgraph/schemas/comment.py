from pydantic import BaseModel, field_validator


class CommentCreate(BaseModel):
    event_id: str
    text: str

    @field_validator("text")
    @classmethod
    def text_required(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Comment text is required")
        return value
