from __future__ import annotations

import logging
import smtplib
import ssl
from email.message import EmailMessage
from typing import Sequence

logger = logging.getLogger(__name__)


class MailerError(RuntimeError):
    """Sending mail through the SMTP transport failed."""


class Mailer:
    """Send multipart (text + HTML) mails from *sender* to *receivers*.

    The transport is SMTP over implicit TLS (``SMTP_SSL``), port 465 unless
    ``port`` says otherwise.  ``user``/``password`` are used for SMTP
    authentication when ``user`` is set.
    """

    def __init__(
        self,
        sender: str,
        receivers: Sequence[str],
        *,
        host: str,
        user: str = "",
        password: str = "",
        port: int = 465,
    ) -> None:
        self.sender = sender
        self.receivers = list(receivers)
        self.host = host
        self.user = user
        self.password = password
        self.port = port

    def build_message(self, subject: str, text: str, html: str) -> EmailMessage:
        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = self.sender
        msg["To"] = ", ".join(self.receivers)
        msg.set_content(text)
        msg.add_alternative(f"<html><body>{html}</body></html>", subtype="html")
        return msg

    def send_mail(self, subject: str, text: str, html: str) -> None:
        """Send one mail; raise ``MailerError`` if the transport fails."""
        msg = self.build_message(subject, text, html)
        ctx = ssl.create_default_context()
        logger.info("Sending %r to %s via %s:%s", subject, msg["To"], self.host, self.port)
        try:
            with smtplib.SMTP_SSL(self.host, self.port, context=ctx) as smtp:
                if self.user:
                    smtp.login(self.user, self.password)
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError) as exc:
            raise MailerError(f"Could not send mail via {self.host}:{self.port} – {exc}") from exc


__all__ = ["Mailer", "MailerError"]
