"""Bulk email to every doctor in a group, recorded in the History collection.

Flow:
  1. load the group (GroupNotFoundError if absent)
  2. load its doctors (NoDoctorsError if none)
  3. collect truthy ``doctorDetails.email`` values, no dedup or validation
  4. send a single message to all of them
  5. append a History record

The send outcome is logged by the mailer. Unless ``record_failures`` is
set the History record always says "success", matching what existing
clients already rely on.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from group_mailer.core.exceptions import GroupNotFoundError, NoDoctorsError
from group_mailer.models.doctor import DoctorDocument
from group_mailer.models.history import HistoryStatus
from group_mailer.services.group_store import GroupStore
from group_mailer.services.mailer import Mailer, SendResult

logger = logging.getLogger(__name__)


@dataclass
class DispatchResult:
    recipients: List[str]
    send: SendResult
    status: HistoryStatus
    history_id: str


def recipient_emails(doctors: List[Dict[str, Any]]) -> List[str]:
    emails = []
    for doctor in doctors:
        details = doctor["data"].get("doctorDetails") or {}
        email = DoctorDocument(doctorDetails=details).email
        if email:
            emails.append(str(email))
    return emails


class NotificationService:
    def __init__(self, store: GroupStore, mailer: Mailer, record_failures: bool = False):
        self.store = store
        self.mailer = mailer
        self.record_failures = record_failures

    async def send_group_email(
        self,
        group_id: str,
        subject: Optional[str],
        message: Optional[str],
    ) -> DispatchResult:
        group = await self.store.get_group(group_id)
        if group is None:
            raise GroupNotFoundError(group_id)

        doctors = await self.store.list_doctors(group_id)
        if not doctors:
            raise NoDoctorsError(group_id)

        recipients = recipient_emails(doctors)
        result = await self.mailer.send(recipients, subject, message)

        status = HistoryStatus.SUCCESS
        if self.record_failures and not result.ok:
            status = HistoryStatus.FAILED

        history_id = await self.store.add_history(group_id, status)
        logger.info(
            "Group %s email dispatched to %d recipient(s), history %s (%s)",
            group_id, len(recipients), history_id, status.value,
        )
        return DispatchResult(recipients=recipients, send=result, status=status, history_id=history_id)
