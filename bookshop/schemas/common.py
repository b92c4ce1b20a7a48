"""Schemas shared by several routers."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain confirmation or error message."""

    message: str = Field(..., examples=["Review added successfully"])
