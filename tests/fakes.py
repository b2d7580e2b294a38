"""In-memory stand-ins for the Firestore store and the SMTP mailer."""
from copy import deepcopy
from typing import Any, Dict, List, Optional
from uuid import uuid4

from google.api_core.exceptions import ServiceUnavailable

from group_mailer.models.history import HistoryStatus
from group_mailer.services.mailer import SendResult


def _new_id() -> str:
    return uuid4().hex[:20]


class FakeStore:
    """Mirrors GroupStore; set ``fail`` to make every call raise like an unreachable backend."""

    def __init__(self):
        self.groups: Dict[str, Dict[str, Any]] = {}
        self.doctors: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self.history: Dict[str, Dict[str, Any]] = {}
        self.fail = False

    def _check(self):
        if self.fail:
            raise ServiceUnavailable("firestore unavailable")

    async def list_groups(self):
        self._check()
        return [{"id": k, "data": deepcopy(v)} for k, v in self.groups.items()]

    async def get_group(self, group_id: str):
        self._check()
        if group_id not in self.groups:
            return None
        return {"id": group_id, "data": deepcopy(self.groups[group_id])}

    async def create_group(self, details):
        self._check()
        group_id = _new_id()
        self.groups[group_id] = {"groupDetails": deepcopy(details)}
        return group_id

    async def update_group(self, group_id, details):
        self._check()
        self.groups.setdefault(group_id, {})["groupDetails"] = deepcopy(details)

    async def delete_group(self, group_id):
        self._check()
        self.groups.pop(group_id, None)

    async def list_doctors(self, group_id):
        self._check()
        return [{"id": k, "data": deepcopy(v)} for k, v in self.doctors.get(group_id, {}).items()]

    async def get_doctor(self, group_id, doctor_id):
        self._check()
        doctor = self.doctors.get(group_id, {}).get(doctor_id)
        if doctor is None:
            return None
        return {"id": doctor_id, "data": deepcopy(doctor)}

    async def add_doctor(self, group_id, details):
        self._check()
        doctor_id = _new_id()
        self.doctors.setdefault(group_id, {})[doctor_id] = {"doctorDetails": deepcopy(details)}
        return doctor_id

    async def update_doctor(self, group_id, doctor_id, details):
        self._check()
        self.doctors[group_id][doctor_id]["doctorDetails"] = deepcopy(details)

    async def delete_doctor(self, group_id, doctor_id):
        self._check()
        self.doctors.get(group_id, {}).pop(doctor_id, None)

    async def add_history(self, group_id, status: HistoryStatus):
        self._check()
        record_id = _new_id()
        self.history[record_id] = {
            "groupId": group_id,
            "status": HistoryStatus(status).value,
            "timestamp": "server-timestamp",
        }
        return record_id

    async def list_history(self, group_id: Optional[str] = None):
        self._check()
        return [
            {"id": k, "data": dict(v)}
            for k, v in self.history.items()
            if not group_id or v["groupId"] == group_id
        ]

    # Test helpers
    def seed_group(self, details: Dict[str, Any], emails: List[Any] = ()) -> str:
        group_id = _new_id()
        self.groups[group_id] = {"groupDetails": details}
        for email in emails:
            self.doctors.setdefault(group_id, {})[_new_id()] = {"doctorDetails": {"email": email}}
        return group_id


class FakeMailer:
    def __init__(self, ok: bool = True):
        self.ok = ok
        self.sent: List[Dict[str, Any]] = []

    async def send(self, recipients, subject, text):
        self.sent.append({"recipients": list(recipients), "subject": subject, "text": text})
        if self.ok:
            return SendResult(ok=True)
        return SendResult(ok=False, error="relay refused")
