"""Doctor routes.

Doctors are stored under ``Groups/{group_id}/doctors``. Two addressing
schemes are served: the path form under ``/groups/{group_id}/doctors``
and the older ``/doctors`` routes (query string for reads, path for
writes) that existing clients still call.
"""
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse

from group_mailer.api.deps import get_store
from group_mailer.models.group import DocumentOut
from group_mailer.services.group_store import GroupStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["doctors"])

DOCTOR_NOT_FOUND = {"message": "Doctor not found"}


async def _read_doctor(store: GroupStore, group_id: str, doctor_id: str):
    try:
        doctor = await store.get_doctor(group_id, doctor_id)
    except Exception:
        logger.exception("Error getting doctor %s in group %s", doctor_id, group_id)
        return JSONResponse(status_code=500, content={"error": "Error getting doctor"})

    if doctor is None:
        return JSONResponse(status_code=404, content=DOCTOR_NOT_FOUND)
    return {"doctor": doctor["data"]}


@router.get("/groups/{group_id}/doctors", response_model=List[DocumentOut])
async def list_group_doctors(group_id: str, store: GroupStore = Depends(get_store)):
    """A missing group and a group with no doctors both give 404."""
    try:
        doctors = await store.list_doctors(group_id)
    except Exception:
        logger.exception("Error getting doctors for the group %s", group_id)
        return JSONResponse(status_code=500, content={"error": "Error getting doctors for the group"})

    if not doctors:
        return JSONResponse(status_code=404, content={"message": "No doctors found for the group"})
    return doctors


@router.post("/groups/{group_id}/doctors", status_code=201)
async def add_doctor(
    group_id: str,
    data: Dict[str, Any] = Body(...),
    store: GroupStore = Depends(get_store),
):
    try:
        doctor_id = await store.add_doctor(group_id, data)
    except Exception:
        logger.exception("Error adding doctor to the group %s", group_id)
        return JSONResponse(status_code=500, content={"error": "Error adding doctor to the group"})

    return {"message": "Doctor added to the group successfully", "doctorId": doctor_id}


@router.get("/groups/{group_id}/doctors/{doctor_id}")
async def get_group_doctor(group_id: str, doctor_id: str, store: GroupStore = Depends(get_store)):
    return await _read_doctor(store, group_id, doctor_id)


@router.get("/doctors")
async def get_doctor(
    doctorId: str = Query(...),
    groupId: str = Query(...),
    store: GroupStore = Depends(get_store),
):
    return await _read_doctor(store, groupId, doctorId)


@router.put("/doctors/{curr_group}/{doctor_id}")
async def update_doctor(
    curr_group: str,
    doctor_id: str,
    data: Dict[str, Any] = Body(...),
    store: GroupStore = Depends(get_store),
):
    try:
        if await store.get_doctor(curr_group, doctor_id) is None:
            return JSONResponse(status_code=404, content=DOCTOR_NOT_FOUND)
        await store.update_doctor(curr_group, doctor_id, data)
    except Exception:
        logger.exception("Error updating doctor %s", doctor_id)
        return JSONResponse(status_code=500, content={"error": "Error updating doctor"})

    return {"message": "Doctor updated successfully"}


@router.delete("/doctors/{curr_group}/{doctor_id}")
async def delete_doctor(curr_group: str, doctor_id: str, store: GroupStore = Depends(get_store)):
    try:
        if await store.get_doctor(curr_group, doctor_id) is None:
            return JSONResponse(status_code=404, content=DOCTOR_NOT_FOUND)
        await store.delete_doctor(curr_group, doctor_id)
    except Exception:
        logger.exception("Error deleting doctor %s", doctor_id)
        return JSONResponse(status_code=500, content={"error": "Error deleting doctor"})

    return {"message": "Doctor deleted successfully"}
