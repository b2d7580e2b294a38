"""Service layer: Firestore access, the SMTP mailer and the group email dispatcher."""
from group_mailer.services.group_store import GroupStore
from group_mailer.services.mailer import Mailer, SendResult
from group_mailer.services.notification_service import NotificationService

__all__ = ["GroupStore", "Mailer", "SendResult", "NotificationService"]
