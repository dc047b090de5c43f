from __future__ import annotations

import logging

from app.application.ports.mailer import MailerPort


class MockMailer(MailerPort):
    def __init__(self) -> None:
        self.sent: list[tuple[str, str, str]] = []
        self._logger = logging.getLogger(__name__)

    def send_html(self, to: str, subject: str, html: str) -> None:
        self.sent.append((to, subject, html))
        self._logger.info("Mock email send", extra={"email": to, "reason": subject})
