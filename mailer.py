import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

logger = logging.getLogger(__name__)


class MailDispatchError(Exception):
    """Raised when the mail transport fails for any reason."""


class MailDispatcher:
    """
    Thin wrapper around one SMTP account.

    A new connection is opened per send, so one instance can be shared across
    concurrent requests.
    """

    def __init__(self, user: str, password: str, host: str = "smtp.gmail.com", port: int = 587, timeout: float = 15):
        self.user = user
        self.password = password
        self.host = host
        self.port = port
        self.timeout = timeout

    def _connect(self) -> smtplib.SMTP:
        server = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
        try:
            server.starttls()
            if self.user and self.password:
                server.login(self.user, self.password)
        except Exception:
            server.close()
            raise
        return server

    def send(self, from_address: str, to: str, subject: str, html: str) -> None:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = from_address
        msg["To"] = to
        msg.attach(MIMEText(html, "html"))

        try:
            with self._connect() as server:
                server.sendmail(self.user or from_address, [to], msg.as_string())
        except (smtplib.SMTPException, OSError, ValueError) as e:
            raise MailDispatchError(str(e)) from e

    def verify(self) -> bool:
        """Check connectivity and credentials. Logs the outcome, never raises."""
        try:
            with self._connect() as server:
                server.noop()
        except Exception:
            logger.exception("Mail transport verification failed (%s:%s)", self.host, self.port)
            return False
        logger.info("Mail transport ready (%s:%s)", self.host, self.port)
        return True
