"""
Outbound mail through an OAuth2-authenticated SMTP relay.

The relay is reached over implicit TLS. When an OAuth2 client is
configured the session authenticates with XOAUTH2 using an access token
minted from the refresh token; otherwise it falls back to LOGIN with
``MAIL_USER`` / ``MAIL_PASS``. Nothing here is validated at startup, so
a missing secret only shows up as a failed send.
"""
from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from typing import List, Optional

from fastapi.concurrency import run_in_threadpool
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials

from group_mailer.core.config import Settings

logger = logging.getLogger(__name__)


@dataclass
class SendResult:
    ok: bool
    error: Optional[str] = None


class Mailer:
    def __init__(self, settings: Settings):
        self.host = settings.MAIL_HOST
        self.port = settings.MAIL_PORT
        self.user = settings.MAIL_USER
        self.password = settings.MAIL_PASS
        self.sender = settings.sender
        self.client_id = settings.CLIENT_ID
        self.client_secret = settings.SECRET_KEY
        self.refresh_token = settings.REFRESH_TOKEN
        self.token_uri = settings.OAUTH_TOKEN_URI

    @property
    def uses_oauth(self) -> bool:
        return bool(self.client_id and self.client_secret and self.refresh_token)

    def build_message(self, recipients: List[str], subject: Optional[str], text: Optional[str]) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = self.sender
        if recipients:
            msg["To"] = ", ".join(recipients)
        msg["Subject"] = subject or ""
        msg.set_content(text or "")
        return msg

    def _access_token(self) -> str:
        creds = Credentials(
            None,
            refresh_token=self.refresh_token,
            token_uri=self.token_uri,
            client_id=self.client_id,
            client_secret=self.client_secret,
        )
        creds.refresh(Request())
        return creds.token

    def _login(self, server: smtplib.SMTP) -> None:
        if self.uses_oauth:
            token = self._access_token()
            auth_string = f"user={self.user}\1auth=Bearer {token}\1\1"
            server.auth("XOAUTH2", lambda challenge=None: auth_string)
        else:
            server.login(self.user, self.password)

    def _send_sync(self, msg: EmailMessage) -> None:
        if not msg["To"]:
            raise ValueError("No recipients defined")
        with smtplib.SMTP_SSL(self.host, self.port) as server:
            self._login(server)
            server.send_message(msg)

    async def send(self, recipients: List[str], subject: Optional[str], text: Optional[str]) -> SendResult:
        """Send one message to all recipients; failures are returned, not raised."""
        try:
            msg = self.build_message(recipients, subject, text)
            await run_in_threadpool(self._send_sync, msg)
        except Exception as e:
            logger.error("Error %s", e)
            return SendResult(ok=False, error=str(e))

        logger.info("Email sent successfully")
        return SendResult(ok=True)
