from __future__ import annotations

import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import parseaddr

from app.application.ports.mailer import MailerPort


class SmtpMailer(MailerPort):
    """Send HTML mail through an SMTP relay (STARTTLS, or implicit TLS on port 465)."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        from_address: str,
        timeout: float = 30.0,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._from_address = from_address
        self._timeout = timeout
        self._logger = logging.getLogger(__name__)

    def send_html(self, to: str, subject: str, html: str) -> None:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = self._from_address
        msg["To"] = to
        msg.attach(MIMEText(html, "html", "utf-8"))

        context = ssl.create_default_context()
        if self._port == 465:
            server = smtplib.SMTP_SSL(self._host, self._port, context=context, timeout=self._timeout)
        else:
            server = smtplib.SMTP(self._host, self._port, timeout=self._timeout)

        # Leaving the block sends QUIT and always closes the socket.
        with server:
            if self._port != 465:
                server.starttls(context=context)
            if self._username:
                server.login(self._username, self._password)
            server.sendmail(parseaddr(self._from_address)[1], [to], msg.as_string())

        self._logger.info("Email sent via SMTP", extra={"email": to})
