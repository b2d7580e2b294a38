from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class HistoryStatus(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"


class HistoryRecord(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    groupId: str
    status: HistoryStatus
    # Firestore server timestamp; sentinel on write, DatetimeWithNanoseconds on read
    timestamp: Optional[Any] = None


class EmailRequest(BaseModel):
    subject: Optional[str] = Field(None, description="Email subject line")
    message: Optional[str] = Field(None, description="Plain-text email body")
