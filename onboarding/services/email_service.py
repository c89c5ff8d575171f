import logging
import smtplib
from email.mime.text import MIMEText

from onboarding.config import settings

logger = logging.getLogger(__name__)


class EmailService:
    """SMTP notification sender.

    Delivery is fire-and-forget: transport failures are logged and never
    reach the caller. Without an SMTP host the message is only logged.
    """

    def __init__(
        self,
        host: str | None = settings.SMTP_HOST,
        port: int = settings.SMTP_PORT,
        user: str | None = settings.SMTP_USER,
        password: str | None = settings.SMTP_PASS,
        from_email: str = settings.FROM_EMAIL,
    ):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.from_email = from_email

    def send(self, to_email: str, subject: str, body: str) -> None:
        if not self.host:
            logger.warning("SMTP not configured. Email to %s (%s): %s", to_email, subject, body)
            return

        msg = MIMEText(body)
        msg["Subject"] = subject
        msg["From"] = self.from_email
        msg["To"] = to_email

        try:
            with smtplib.SMTP(self.host, self.port) as server:
                server.starttls()
                if self.user:
                    server.login(self.user, self.password or "")
                server.send_message(msg)
            logger.info("Email '%s' sent to %s", subject, to_email)
        except (smtplib.SMTPException, OSError):
            logger.exception("Failed to send email '%s' to %s", subject, to_email)


def get_notification_sender() -> EmailService:
    return EmailService()
