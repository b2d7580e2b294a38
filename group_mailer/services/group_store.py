from __future__ import annotations

from typing import Any, Dict, List, Optional

from google.cloud.firestore import SERVER_TIMESTAMP, FieldFilter

from group_mailer.models.doctor import DoctorDocument
from group_mailer.models.group import GroupDocument
from group_mailer.models.history import HistoryRecord, HistoryStatus

GROUPS = "Groups"
HISTORY = "History"
DOCTORS = "doctors"


# -------------------------
# Helpers
# -------------------------
def _to_item(snapshot) -> Dict[str, Any]:
    return {"id": snapshot.id, "data": snapshot.to_dict() or {}}


async def _collect(query) -> List[Dict[str, Any]]:
    return [_to_item(d) async for d in query.stream()]


class GroupStore:
    """
    Firestore access for groups, their doctors and the email history.

    Layout:
      Groups/{group_id}
      Groups/{group_id}/doctors/{doctor_id}
      History/{record_id}

    Point reads return ``None`` when the document does not exist; a
    document that exists with no fields comes back as ``{"id": ..., "data": {}}``.
    Transport errors from the client are not caught here.
    """

    def __init__(self, db):
        self.db = db

    async def close(self) -> None:
        # AsyncClient has no close(); shut its gRPC channel through the transport
        await self.db._firestore_api.transport.close()

    def _group_ref(self, group_id: str):
        return self.db.collection(GROUPS).document(group_id)

    def _doctors(self, group_id: str):
        return self._group_ref(group_id).collection(DOCTORS)

    # -------------------------
    # Groups
    # -------------------------
    async def list_groups(self) -> List[Dict[str, Any]]:
        return await _collect(self.db.collection(GROUPS))

    async def get_group(self, group_id: str) -> Optional[Dict[str, Any]]:
        snapshot = await self._group_ref(group_id).get()
        if not snapshot.exists:
            return None
        return _to_item(snapshot)

    async def create_group(self, details: Dict[str, Any]) -> str:
        _, ref = await self.db.collection(GROUPS).add(
            GroupDocument(groupDetails=details).model_dump()
        )
        return ref.id

    async def update_group(self, group_id: str, details: Dict[str, Any]) -> None:
        # Replaces groupDetails wholesale; other top-level fields are untouched.
        # Writes even when the group does not exist yet.
        await self._group_ref(group_id).set(
            GroupDocument(groupDetails=details).model_dump(),
            merge=["groupDetails"],
        )

    async def delete_group(self, group_id: str) -> None:
        # The doctors sub-collection is left in place.
        await self._group_ref(group_id).delete()

    # -------------------------
    # Doctors
    # -------------------------
    async def list_doctors(self, group_id: str) -> List[Dict[str, Any]]:
        return await _collect(self._doctors(group_id))

    async def get_doctor(self, group_id: str, doctor_id: str) -> Optional[Dict[str, Any]]:
        snapshot = await self._doctors(group_id).document(doctor_id).get()
        if not snapshot.exists:
            return None
        return _to_item(snapshot)

    async def add_doctor(self, group_id: str, details: Dict[str, Any]) -> str:
        _, ref = await self._doctors(group_id).add(
            DoctorDocument(doctorDetails=details).model_dump()
        )
        return ref.id

    async def update_doctor(self, group_id: str, doctor_id: str, details: Dict[str, Any]) -> None:
        await self._doctors(group_id).document(doctor_id).update(
            DoctorDocument(doctorDetails=details).model_dump()
        )

    async def delete_doctor(self, group_id: str, doctor_id: str) -> None:
        await self._doctors(group_id).document(doctor_id).delete()

    # -------------------------
    # History
    # -------------------------
    async def add_history(self, group_id: str, status: HistoryStatus) -> str:
        record = HistoryRecord(groupId=group_id, status=status, timestamp=SERVER_TIMESTAMP)
        _, ref = await self.db.collection(HISTORY).add(record.model_dump())
        return ref.id

    async def list_history(self, group_id: Optional[str] = None) -> List[Dict[str, Any]]:
        query = self.db.collection(HISTORY)
        if group_id:
            query = query.where(filter=FieldFilter("groupId", "==", group_id))
        return await _collect(query)
