from __future__ import annotations

import html
import logging

from app.application.ports.mailer import MailerPort
from app.domain.entities.slot import Slot


def render_confirmation_html(slot: Slot, business_name: str, business_address: str) -> str:
    """Render the confirmation email body. User-supplied values are HTML-escaped."""
    client = slot.client
    first_name = html.escape(client.first_name if client else "")
    service = html.escape(client.service if client else "")
    return f"""
<h2>Bonjour {first_name},</h2>

<p>Votre rendez-vous est <strong>confirmé</strong> ✨</p>

<p>
  <strong>Prestation :</strong> {service}<br>
  <strong>Date :</strong> {html.escape(slot.date)}<br>
  <strong>Heure :</strong> {html.escape(slot.time)}<br><br>
  <strong>Adresse :</strong><br>
  {html.escape(business_address)}
</p>

<p>
  Merci pour votre confiance 💖<br>
  <strong>{html.escape(business_name)}</strong>
</p>
"""


class SendConfirmationUseCase:
    def __init__(self, mailer: MailerPort, business_name: str, business_address: str) -> None:
        self._mailer = mailer
        self._business_name = business_name
        self._business_address = business_address
        self._logger = logging.getLogger(__name__)

    def execute(self, slot: Slot) -> bool:
        """Send the confirmation email. Returns True if sent, False if skipped or failed."""
        if slot.client is None or not slot.client.email:
            return False

        subject = f"✨ Confirmation de votre rendez-vous - {self._business_name}"
        body = render_confirmation_html(slot, self._business_name, self._business_address)
        try:
            self._mailer.send_html(to=slot.client.email, subject=subject, html=body)
        except Exception as e:
            # Booking is already committed here.
            self._logger.exception(
                "Confirmation email failed",
                extra={"email": slot.client.email, "date": slot.date, "time": slot.time, "error": str(e)},
            )
            return False
        return True
