"""Pydantic DTOs for categories."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints


class CategoryCreate(BaseModel):
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)] = Field(
        ..., examples=["news"]
    )


class CategoryResponse(BaseModel):
    id: int
    name: str
    created_at: datetime

    model_config = {"from_attributes": True}
