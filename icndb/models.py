import html
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


__all__ = ("ApiResponse", "Joke")


class ApiResponse(BaseModel):
    """Envelope wrapping every ICNDB response"""

    type: str = Field(strict=True)
    value: Any = None


class Joke(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(ge=0, strict=True)
    content: str = Field(alias="joke", min_length=1, strict=True)
    categories: list[str] = Field(default_factory=list)

    @field_validator("content")
    @classmethod
    def unescape_entities(cls, content: str) -> str:
        # ICNDB sends quotes and the like as HTML entities
        return html.unescape(content)
