from __future__ import annotations

import logging
import smtplib
from email.mime.text import MIMEText

from autohaus.ports.email_sender import EmailMessage, EmailSender

logger = logging.getLogger(__name__)


class SmtpEmailSender(EmailSender):
    """Delivers HTML e-mail through an SMTP relay (STARTTLS by default)."""

    def __init__(
        self,
        host: str | None,
        port: int,
        username: str | None,
        password: str | None,
        sender: str | None,
        *,
        use_tls: bool = True,
        timeout: int = 10,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._sender = sender
        self._use_tls = use_tls
        self._timeout = timeout

    def send(self, message: EmailMessage) -> bool:
        if not self._host or not self._sender:
            logger.error(
                "SMTP is not configured, e-mail dropped",
                extra={"to": message.to, "subject": message.subject},
            )
            return False

        mime = MIMEText(message.html, "html", "utf-8")
        mime["Subject"] = message.subject
        mime["From"] = self._sender
        mime["To"] = message.to
        if message.reply_to:
            mime["Reply-To"] = message.reply_to
        if message.high_priority:
            mime["X-Priority"] = "1"
            mime["Importance"] = "high"

        try:
            with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as smtp:
                if self._use_tls:
                    smtp.starttls()
                if self._username and self._password:
                    smtp.login(self._username, self._password)
                smtp.sendmail(self._sender, [message.to], mime.as_string())
        except (smtplib.SMTPException, OSError) as exc:
            logger.error(
                "E-mail delivery failed",
                exc_info=exc,
                extra={"to": message.to, "subject": message.subject},
            )
            return False

        logger.info("E-mail sent", extra={"to": message.to, "subject": message.subject})
        return True
