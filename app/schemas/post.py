"""Post and comment schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from app.utils.validators import require


class TextRequest(BaseModel):
    """Body shared by new posts and new comments."""

    model_config = ConfigDict(validate_default=True)

    text: Optional[str] = None

    @field_validator("text", mode="before")
    @classmethod
    def check_text(cls, v):
        return require(v, "Text is required")


class PostCreate(TextRequest):
    pass


class CommentCreate(TextRequest):
    pass
