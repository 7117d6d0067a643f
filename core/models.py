from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["user", "assistant"]


class Message(BaseModel):
    """One conversation entry. Frozen once created."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    role: Role = Field(..., description="'user' or 'assistant'")
    content: str


class ChatRequest(BaseModel):
    messages: List[Message] = Field(
        ...,
        min_length=1,
        description="Full conversation so far, oldest first, ending with the latest user prompt",
    )


class ChatResponse(BaseModel):
    response: str


class ChatError(BaseModel):
    error: str
