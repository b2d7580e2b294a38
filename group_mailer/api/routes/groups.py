"""Group routes.

Groups live in the ``Groups`` collection; the request body is stored
verbatim under ``groupDetails``. Update and delete write straight
through without checking that the group exists.
"""
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from group_mailer.api.deps import get_store
from group_mailer.models.group import DocumentOut
from group_mailer.services.group_store import GroupStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/groups", tags=["groups"])


@router.get("", response_model=List[DocumentOut])
async def list_groups(store: GroupStore = Depends(get_store)):
    try:
        return await store.list_groups()
    except Exception:
        logger.exception("Error getting groups")
        return JSONResponse(status_code=500, content={"error": "Error getting groups"})


@router.get("/{group_id}", response_model=DocumentOut)
async def get_group(group_id: str, store: GroupStore = Depends(get_store)):
    try:
        group = await store.get_group(group_id)
    except Exception:
        logger.exception("Error getting group with ID %s", group_id)
        return JSONResponse(status_code=500, content={"error": "Error getting group"})

    if group is None:
        return JSONResponse(status_code=404, content={"error": "Group not found"})
    return group


@router.post("", status_code=201)
async def create_group(
    data: Dict[str, Any] = Body(...),
    store: GroupStore = Depends(get_store),
):
    try:
        group_id = await store.create_group(data)
    except Exception:
        logger.exception("Error creating group")
        return JSONResponse(status_code=500, content={"error": "Error creating group"})

    return {"message": "Group created successfully", "groupId": group_id}


@router.put("/{group_id}")
async def update_group(
    group_id: str,
    data: Dict[str, Any] = Body(...),
    store: GroupStore = Depends(get_store),
):
    try:
        await store.update_group(group_id, data)
    except Exception:
        logger.exception("Error updating group %s", group_id)
        return JSONResponse(status_code=500, content={"error": "Error updating group"})

    return {"message": "Group updated successfully"}


@router.delete("/{group_id}")
async def delete_group(group_id: str, store: GroupStore = Depends(get_store)):
    try:
        await store.delete_group(group_id)
    except Exception:
        logger.exception("Error deleting group %s", group_id)
        return JSONResponse(status_code=500, content={"error": "Error deleting group"})

    return {"message": "Group deleted successfully"}
