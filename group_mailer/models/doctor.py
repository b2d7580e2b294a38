"""Pydantic model for doctor documents nested under a group."""
from pydantic import BaseModel, Field
from typing import Any, Dict, Optional


class DoctorDocument(BaseModel):
    doctorDetails: Dict[str, Any] = Field(default_factory=dict)

    @property
    def email(self) -> Optional[str]:
        return self.doctorDetails.get("email")
