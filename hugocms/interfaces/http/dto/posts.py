from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CreatePostRequestDTO(BaseModel):
    """Shape check only; emptiness rules live in the create-post use case."""

    model_config = ConfigDict(str_strip_whitespace=False, extra="ignore")

    title: str = ""
    content: str = ""
