"""Group email dispatch and the email history log."""
import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse

from group_mailer.api.deps import get_notification_service, get_store
from group_mailer.core.exceptions import GroupMailerError
from group_mailer.models.history import EmailRequest, HistoryStatus
from group_mailer.models.group import DocumentOut
from group_mailer.services.group_store import GroupStore
from group_mailer.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["notifications"])


@router.post("/groups/{group_id}/send-email")
async def send_group_email(
    group_id: str,
    payload: EmailRequest = Body(...),
    service: NotificationService = Depends(get_notification_service),
):
    """Send one email to every doctor in the group and record it in History.

    Responds 200 even when the relay rejects the message, unless
    failure recording is switched on (then 502).
    """
    try:
        result = await service.send_group_email(group_id, payload.subject, payload.message)
    except GroupMailerError as e:
        return JSONResponse(status_code=e.status_code, content={"error": e.message})
    except Exception:
        logger.exception("Error sending email to doctors of group %s", group_id)
        return JSONResponse(status_code=500, content={"error": "Error sending email to doctors"})

    if result.status == HistoryStatus.FAILED:
        return JSONResponse(status_code=502, content={"error": "Error sending email to doctors"})
    return {"message": "Email sent successfully to all doctors in the group"}


@router.get("/history", response_model=List[DocumentOut])
async def list_history(
    groupId: Optional[str] = Query(None),
    store: GroupStore = Depends(get_store),
):
    try:
        return await store.list_history(groupId)
    except Exception:
        logger.exception("Error getting email history")
        return JSONResponse(status_code=500, content={"error": "Error getting email history"})
