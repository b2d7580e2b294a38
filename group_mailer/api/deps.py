"""
API dependencies.

Service handles are built once in the startup hook and kept on
``app.state``; these dependencies hand them to the routes. Tests swap
them out through ``app.dependency_overrides``.
"""

from fastapi import Depends, Request

from group_mailer.core.config import Settings, settings
from group_mailer.services.group_store import GroupStore
from group_mailer.services.mailer import Mailer
from group_mailer.services.notification_service import NotificationService


def get_settings() -> Settings:
    return settings


def get_store(request: Request) -> GroupStore:
    return request.app.state.store


def get_mailer(request: Request) -> Mailer:
    return request.app.state.mailer


def get_notification_service(
    store: GroupStore = Depends(get_store),
    mailer: Mailer = Depends(get_mailer),
    config: Settings = Depends(get_settings),
) -> NotificationService:
    return NotificationService(store, mailer, record_failures=config.RECORD_SEND_FAILURES)
