"""Pydantic models for group documents and the generic ``{id, data}`` envelope."""
from pydantic import BaseModel, Field
from typing import Any, Dict


class DocumentOut(BaseModel):
    id: str
    data: Dict[str, Any] = Field(default_factory=dict)


class GroupDocument(BaseModel):
    # Free-form; stored exactly as the client sent it
    groupDetails: Dict[str, Any] = Field(default_factory=dict)
